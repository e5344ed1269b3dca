"""Tests for delete_if(), keep_if() and PendingFilter."""

import logging as _logging

import pytest as _pytest

import mapext as mapext


class TestDeleteIf:
    """delete_if with a predicate."""

    def test_removes_matching(self, abc_map: dict[str, int]) -> None:
        """Entries with a truthy predicate are removed."""
        result = mapext.delete_if(abc_map, lambda key, value: key >= "b")

        assert result == {"a": 100}

    def test_returns_same_container(self, abc_map: dict[str, int]) -> None:
        """The container is filtered in place and returned."""
        assert mapext.delete_if(abc_map, lambda key, value: False) is abc_map

    def test_predicate_gets_key_and_value(self, abc_map: dict[str, int]) -> None:
        """The predicate sees each pair in order."""
        seen: list[tuple[str, int]] = []

        mapext.delete_if(abc_map, lambda key, value: seen.append((key, value)))

        assert seen == [("a", 100), ("b", 200), ("c", 300)]

    def test_truthiness(self) -> None:
        """Non-bool predicate results are judged by truthiness."""
        h = {"a": 0, "b": 1, "c": ""}

        mapext.delete_if(h, lambda key, value: value)

        assert h == {"a": 0, "c": ""}

    def test_empty_container(self) -> None:
        """Nothing to visit, nothing removed."""
        assert mapext.delete_if({}, lambda key, value: True) == {}

    def test_remaining_order_preserved(self) -> None:
        """Survivors keep their relative order."""
        h = {k: i for i, k in enumerate("abcdef")}

        mapext.delete_if(h, lambda key, value: value % 2 == 1)

        assert list(h) == ["a", "c", "e"]


class TestKeepIf:
    """keep_if with a predicate."""

    def test_keeps_matching(self, abc_map: dict[str, int]) -> None:
        """Entries with a falsy predicate are removed."""
        result = mapext.keep_if(abc_map, lambda key, value: value >= 200)

        assert result == {"b": 200, "c": 300}
        assert result is abc_map

    def test_predicate_gets_key_and_value(self) -> None:
        """keep_if passes key and value separately."""
        h = {"a": 1, "b": 2}

        mapext.keep_if(h, lambda key, value: key == "a" and value == 1)

        assert h == {"a": 1}


class TestReentrantPredicates:
    """Predicates that mutate the container they filter."""

    def test_predicate_deletes_later_key(self, abc_map: dict[str, int]) -> None:
        """A key removed before its turn is skipped without error."""
        seen: list[str] = []

        def predicate(key: str, value: int) -> bool:
            seen.append(key)
            if key == "a":
                del abc_map["c"]
            return False

        mapext.delete_if(abc_map, predicate)

        assert seen == ["a", "b"]
        assert abc_map == {"a": 100, "b": 200}

    def test_predicate_deletes_current_key(self, abc_map: dict[str, int]) -> None:
        """Deleting the key being judged and returning True is a no-op delete."""
        def predicate(key: str, value: int) -> bool:
            abc_map.pop(key)
            return True

        mapext.delete_if(abc_map, predicate)

        assert abc_map == {}

    def test_predicate_adds_keys(self, abc_map: dict[str, int]) -> None:
        """Keys added during the walk are not visited."""
        seen: list[str] = []

        def predicate(key: str, value: int) -> bool:
            seen.append(key)
            abc_map[key + "x"] = 0
            return False

        mapext.keep_if(abc_map, lambda key, value: predicate(key, value) or True)

        assert seen == ["a", "b", "c"]
        assert list(abc_map) == ["a", "b", "c", "ax", "bx", "cx"]

    def test_predicate_error_leaves_partial_state(self, abc_map: dict[str, int]) -> None:
        """No rollback when the predicate raises."""
        def predicate(key: str, value: int) -> bool:
            if key == "b":
                raise ValueError("stop")
            return True

        with _pytest.raises(ValueError, match="stop"):
            mapext.delete_if(abc_map, predicate)

        assert abc_map == {"b": 200, "c": 300}


class TestPendingFilter:
    """Deferred mode when no predicate is given."""

    def test_delete_if_without_predicate(self, abc_map: dict[str, int]) -> None:
        """A PendingFilter is returned and nothing is removed."""
        pending = mapext.delete_if(abc_map)

        assert isinstance(pending, mapext.PendingFilter)
        assert pending.kind == "delete_if"
        assert pending.container is abc_map
        assert len(abc_map) == 3

    def test_iteration_is_restartable(self, abc_map: dict[str, int]) -> None:
        """Each iteration yields the current pairs again."""
        pending = mapext.keep_if(abc_map)

        first = list(pending)
        second = list(pending)

        assert first == second == [("a", 100), ("b", 200), ("c", 300)]

    def test_iteration_reflects_later_changes(self, abc_map: dict[str, int]) -> None:
        """A new iteration snapshots the container as it is now."""
        pending = mapext.delete_if(abc_map)
        abc_map["d"] = 400

        assert len(pending) == 4
        assert list(pending)[-1] == ("d", 400)

    def test_mutation_during_iteration(self, abc_map: dict[str, int]) -> None:
        """Iteration is over a snapshot, so deleting while iterating is safe."""
        pending = mapext.delete_if(abc_map)

        for key, _value in pending:
            del abc_map[key]

        assert abc_map == {}

    def test_apply_delete_if(self, abc_map: dict[str, int]) -> None:
        """apply runs the bound delete_if."""
        pending = mapext.delete_if(abc_map)

        result = pending.apply(lambda key, value: key >= "b")

        assert result is abc_map
        assert abc_map == {"a": 100}

    def test_apply_keep_if(self, abc_map: dict[str, int]) -> None:
        """apply runs the bound keep_if."""
        mapext.keep_if(abc_map).apply(lambda key, value: key >= "b")

        assert abc_map == {"b": 200, "c": 300}

    def test_repr(self, abc_map: dict[str, int]) -> None:
        """repr names the filter kind and size."""
        assert repr(mapext.keep_if(abc_map)) == "PendingFilter(keep_if, size=3)"


class TestFilterLogging:
    """Debug logging."""

    def test_summary_logged(
        self, abc_map: dict[str, int], caplog: _pytest.LogCaptureFixture
    ) -> None:
        """The number of removed keys is logged."""
        with caplog.at_level(_logging.DEBUG, logger="mapext"):
            mapext.delete_if(abc_map, lambda key, value: key == "a")

        assert "delete_if: removed 1 key(s), 2 remain" in caplog.text

    @_pytest.mark.usefixtures("trace_callbacks")
    def test_predicate_traced(self, caplog: _pytest.LogCaptureFixture) -> None:
        """With trace_callbacks each predicate call is logged."""
        with caplog.at_level(_logging.DEBUG, logger="mapext"):
            mapext.keep_if({"a": 1}, lambda key, value: True)

        assert "predicate('a', 1) -> True" in caplog.text
