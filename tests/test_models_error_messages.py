"""Tests for inheritance-aware validation messages."""

from __future__ import annotations

import pytest

from i18ntree import DictLoader, I18n, Key
from i18ntree.models import (
    ErrorCollection,
    ErrorMessageResolver,
    ModelMetadata,
    default_messages_loader,
    humanize,
    underscore,
)

ADMIN = ModelMetadata(("admin", "user"))


def _i18n(*trees: dict[str, object]) -> I18n:
    loaders = [default_messages_loader()]
    loaders.extend(DictLoader({"en": tree}) for tree in trees)
    return I18n(loaders=loaders)


def _errors(tree: dict[str, object]) -> dict[str, object]:
    return {"activerecord": {"errors": tree}}


class TestMetadata:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("User", "user"),
            ("AdminUser", "admin_user"),
            ("HTTPRequest", "http_request"),
            ("Order2Item", "order2_item"),
        ],
    )
    def test_underscore(self, name: str, expected: str) -> None:
        assert underscore(name) == expected

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("first_name", "First name"), ("author_id", "Author"), ("email", "Email")],
    )
    def test_humanize(self, key: str, expected: str) -> None:
        assert humanize(key) == expected

    def test_from_names(self) -> None:
        assert ModelMetadata.from_names("Admin", "User") == ADMIN
        assert ADMIN.key == "admin"

    @pytest.mark.parametrize("lineage", [(), ("admin", "")])
    def test_invalid_lineage(self, lineage: tuple[str, ...]) -> None:
        with pytest.raises(ValueError, match="lineage"):
            ModelMetadata(lineage)


class TestCandidateKeys:
    def test_order(self) -> None:
        resolver = ErrorMessageResolver(_i18n())
        keys = resolver.candidate_keys(ADMIN, "name", "blank")
        assert keys == (
            "activerecord.errors.models.admin.attributes.name.blank",
            "activerecord.errors.models.user.attributes.name.blank",
            "activerecord.errors.models.admin.blank",
            "activerecord.errors.models.user.blank",
            "activerecord.errors.messages.blank",
        )
        assert all(isinstance(key, Key) for key in keys)

    def test_custom_scope(self) -> None:
        resolver = ErrorMessageResolver(_i18n(), errors_scope="forms.errors")
        assert resolver.candidate_keys(ModelMetadata(("user",)), "age", "odd")[-1] == (
            "forms.errors.messages.odd"
        )


class TestGenerateMessage:
    """First key in the chain that resolves wins."""

    def test_generic_message(self) -> None:
        resolver = ErrorMessageResolver(_i18n())
        assert resolver.generate_message(ADMIN, "name", "blank") == "can't be blank"

    def test_ancestor_attribute_beats_own_model_message(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(
                _errors(
                    {
                        "models": {
                            "admin": {"blank": "admin blank"},
                            "user": {"attributes": {"name": {"blank": "user name blank"}}},
                        }
                    }
                )
            )
        )
        assert resolver.generate_message(ADMIN, "name", "blank") == "user name blank"

    def test_own_attribute_beats_ancestor_attribute(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(
                _errors(
                    {
                        "models": {
                            "admin": {"attributes": {"name": {"blank": "admin name blank"}}},
                            "user": {"attributes": {"name": {"blank": "user name blank"}}},
                        }
                    }
                )
            )
        )
        assert resolver.generate_message(ADMIN, "name", "blank") == "admin name blank"

    def test_model_message_beats_generic(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(_errors({"models": {"user": {"blank": "user blank"}}}))
        )
        assert resolver.generate_message(ADMIN, "email", "blank") == "user blank"

    def test_interpolates_options_and_names(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(
                {"activerecord": {"models": {"admin": "Administrator"}}},
                _errors({"messages": {"taken": "{{attribute}} of {{model}} is taken"}}),
            )
        )
        assert resolver.generate_message(ADMIN, "email", "taken") == (
            "Email of Administrator is taken"
        )
        assert resolver.generate_message(ADMIN, "name", "too_long", count=10) == (
            "is too long (maximum is 10 characters)"
        )

    def test_custom_literal_message(self) -> None:
        resolver = ErrorMessageResolver(_i18n())
        result = resolver.generate_message(ADMIN, "name", "missing_kind", message="is odd-ish")
        assert result == "is odd-ish"

    def test_custom_message_loses_to_specific_key(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(_errors({"models": {"user": {"blank": "user blank"}}}))
        )
        assert resolver.generate_message(ADMIN, "name", "blank", message="custom") == (
            "user blank"
        )

    def test_custom_key_message(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n({"custom": {"nope": "nope, {{attribute}}"}})
        )
        result = resolver.generate_message(
            ADMIN, "name", "missing_kind", message=Key("custom.nope")
        )
        assert result == "nope, Name"

    def test_unresolvable_gives_marker(self) -> None:
        resolver = ErrorMessageResolver(_i18n())
        result = resolver.generate_message(ADMIN, "name", "missing_kind")
        assert result == (
            "translation missing: en.activerecord.errors.models.admin.attributes.name.missing_kind"
        )


class TestHumanNames:
    def test_translated_via_ancestor(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(
                {
                    "activerecord": {
                        "models": {"user": "Member"},
                        "attributes": {"user": {"first_name": "Given name"}},
                    }
                }
            )
        )
        assert resolver.human_model_name(ADMIN) == "Member"
        assert resolver.human_attribute_name(ADMIN, "first_name") == "Given name"

    def test_humanized_fallback(self) -> None:
        resolver = ErrorMessageResolver(_i18n())
        assert resolver.human_model_name(ModelMetadata(("line_item",))) == "Line item"
        assert resolver.human_attribute_name(ADMIN, "author_id") == "Author"

    def test_plural_table_model_name_uses_singular(self) -> None:
        resolver = ErrorMessageResolver(
            _i18n(
                {"activerecord": {"models": {"user": {"one": "Member", "other": "Members"}}}},
                _errors({"messages": {"taken": "{{attribute}} of {{model}} is taken"}}),
            )
        )
        assert resolver.human_model_name(ADMIN) == "Member"
        assert resolver.generate_message(ADMIN, "email", "taken") == "Email of Member is taken"


class TestErrorCollection:
    def test_add_and_iterate(self) -> None:
        errors = ErrorCollection(ErrorMessageResolver(_i18n()), ADMIN)
        assert errors.add("name", "blank") == "can't be blank"
        errors.add("age", "odd")
        errors.add_to_base("Record is locked")
        assert len(errors) == 3
        assert "name" in errors
        assert "email" not in errors
        assert errors.on("age") == ("must be odd",)
        assert list(errors) == [
            ("name", "can't be blank"),
            ("age", "must be odd"),
            ("base", "Record is locked"),
        ]

    def test_full_messages(self) -> None:
        errors = ErrorCollection(ErrorMessageResolver(_i18n()), ADMIN)
        errors.add("first_name", "blank")
        errors.add_to_base("Record is locked")
        assert errors.full_messages() == ["First name can't be blank", "Record is locked"]

    def test_full_messages_custom_format(self) -> None:
        i18n = _i18n(
            _errors({"format": "{{attribute}}: {{message}}"}),
            {"activerecord": {"attributes": {"admin": {"name": "Login"}}}},
        )
        errors = ErrorCollection(ErrorMessageResolver(i18n), ADMIN)
        errors.add("name", "blank")
        assert errors.full_messages() == ["Login: can't be blank"]

    def test_clear(self) -> None:
        errors = ErrorCollection(ErrorMessageResolver(_i18n()), ADMIN)
        errors.add("name", "blank")
        errors.clear()
        assert len(errors) == 0
        assert errors.full_messages() == []

    def test_locale_per_message(self) -> None:
        i18n = _i18n()
        i18n.store_translations(
            "de", {"activerecord": {"errors": {"messages": {"blank": "muss ausgefüllt werden"}}}}
        )
        errors = ErrorCollection(ErrorMessageResolver(i18n), ADMIN)
        with i18n.locale_scope("de"):
            errors.add("name", "blank")
        assert errors.on("name") == ("muss ausgefüllt werden",)
