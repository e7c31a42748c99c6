"""Tests for ValueTypeManager — registration, lookup and Nullable derivation."""

from __future__ import annotations

import pytest

from valuetypes import ValueTypeError, ValueTypeNotFoundError
from valuetypes.domain.manager import NULLABLE_PREFIX, ValueTypeManager
from valuetypes.domain.options import ValueTypeOptions
from valuetypes.domain.results import ErrorCode


class TestRegister:
    def test_register_adds_nullable_sibling(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Foo", ValueTypeOptions(checker=lambda v, p: v == "foo"))
        assert bare_manager.has("Foo")
        assert bare_manager.has(f"{NULLABLE_PREFIX}Foo")
        assert bare_manager.names() == ["Foo", "NullableFoo"]

    def test_register_returns_manager(self, bare_manager: ValueTypeManager) -> None:
        returned = bare_manager.register("A", ValueTypeOptions()).register("B", ValueTypeOptions())
        assert returned is bare_manager
        assert len(bare_manager) == 4

    def test_register_accepts_mapping(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Upper", {"formatter": str.upper, "is_default_format": True})
        assert bare_manager.value("Upper", "abc").value == "ABC"

    def test_nullable_variant_accepts_none(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Foo", ValueTypeOptions(checker=lambda v, p: v == "foo"))
        assert bare_manager.value("Foo", None).ok is False
        result = bare_manager.value("NullableFoo", None)
        assert result.ok is True
        assert result.value is None

    def test_nullable_variant_still_checks_values(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Foo", ValueTypeOptions(checker=lambda v, p: v == "foo"))
        result = bare_manager.value("NullableFoo", "bar")
        assert result.ok is False
        assert result.code == ErrorCode.CHECK_FAILURE

    def test_nullable_ts_type(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Count", ValueTypeOptions(ts_type="number"))
        assert bare_manager.get("Count").info.ts_type == "number"
        assert bare_manager.get("NullableCount").info.ts_type == "number | null"
        assert bare_manager.get("NullableCount").nullable is True

    def test_nullable_without_ts_type(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Plain", ValueTypeOptions())
        assert bare_manager.get("NullablePlain").info.ts_type is None

    def test_last_registration_wins(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("Foo", ValueTypeOptions(checker=lambda v, p: False))
        bare_manager.register("Foo", ValueTypeOptions(checker=lambda v, p: True))
        assert bare_manager.value("Foo", "x").ok is True
        assert bare_manager.names() == ["Foo", "NullableFoo"]

    def test_override_builtin(self, manager: ValueTypeManager) -> None:
        manager.register("String", ValueTypeOptions(checker=lambda v, p: v == "only"))
        assert manager.value("String", "other").ok is False
        assert manager.value("NullableString", "only").ok is True
        assert manager.get("String").info.is_builtin is False

    def test_register_nullable_name_directly(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("NullableX", ValueTypeOptions())
        assert bare_manager.has("NullableNullableX")


class TestLookup:
    def test_get_unknown_raises(self, manager: ValueTypeManager) -> None:
        with pytest.raises(ValueTypeNotFoundError, match='value type "Nope" does not exist'):
            manager.get("Nope")

    def test_not_found_error_hierarchy(self, manager: ValueTypeManager) -> None:
        with pytest.raises(LookupError):
            manager.get("Nope")
        with pytest.raises(ValueTypeError) as excinfo:
            manager.value("Nope", 1)
        assert excinfo.value.name == "Nope"  # type: ignore[attr-defined]

    def test_check_params_unknown_raises(self, manager: ValueTypeManager) -> None:
        with pytest.raises(ValueTypeNotFoundError):
            manager.check_params("Nope", None)

    def test_has(self, manager: ValueTypeManager) -> None:
        assert manager.has("String") is True
        assert manager.has("string") is False
        assert "Integer" in manager
        assert "Nope" not in manager

    def test_builtin_count(self, manager: ValueTypeManager) -> None:
        assert len(manager) == 48

    def test_names_in_registration_order(self, manager: ValueTypeManager) -> None:
        names = manager.names()
        assert names[:4] == ["Boolean", "NullableBoolean", "Date", "NullableDate"]
        assert list(manager) == names

    def test_items_is_a_snapshot(self, bare_manager: ValueTypeManager) -> None:
        bare_manager.register("A", ValueTypeOptions())
        pairs = bare_manager.items()
        bare_manager.register("B", ValueTypeOptions())
        assert [name for name, _ in pairs] == ["A", "NullableA"]


class TestValue:
    def test_value_delegates_to_item(self, manager: ValueTypeManager) -> None:
        result = manager.value("Integer", "12")
        assert result.ok is True
        assert result.value == 12

    def test_value_with_params_and_format(self, manager: ValueTypeManager) -> None:
        assert manager.value("ENUM", "a", ["a"], False).value == "a"

    def test_custom_validators_injected(self) -> None:
        class NoEmail:
            def __getattr__(self, name: str):  # type: ignore[no-untyped-def]
                return lambda value: False

        mgr = ValueTypeManager(validators=NoEmail())  # type: ignore[arg-type]
        assert mgr.value("Email", "jane.doe@gmail.com").ok is False
        assert mgr.validators.__class__ is NoEmail
