"""Tests for the user message model (core/models.py).

:class:`UserMessage` is a frozen tagged variant — these tests cover the
per-operation field contract, both render modes, and immutability.
"""

from __future__ import annotations

import json

import pytest

from mcli_admin.core.models import (
    USER_MESSAGE_STYLE,
    UserMessage,
    UserOperation,
    build_table_row,
)
from mcli_admin.exceptions import SerializationError


# ---------------------------------------------------------------------------
# Construction contract
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_added_populates_secret_and_enabled_status(self) -> None:
        msg = UserMessage.added("foobar", "foo12345")
        assert msg.op is UserOperation.ADD
        assert msg.access_key == "foobar"
        assert msg.secret_key == "foo12345"
        assert msg.user_status == "enabled"
        assert msg.policy_name == ""
        assert msg.member_of == ()

    @pytest.mark.parametrize(
        "factory, op",
        [
            (UserMessage.removed, UserOperation.REMOVE),
            (UserMessage.enabled, UserOperation.ENABLE),
            (UserMessage.disabled, UserOperation.DISABLE),
        ],
    )
    def test_confirmations_carry_only_access_key(self, factory, op) -> None:
        msg = factory("foobar")
        assert msg.op is op
        assert msg.access_key == "foobar"
        assert not (msg.secret_key or msg.policy_name or msg.user_status or msg.member_of)

    def test_info_member_of_is_tuple(self) -> None:
        msg = UserMessage.info(
            "foobar", user_status="enabled", policy_name="readwrite", member_of=["a", "b"],
        )
        assert msg.member_of == ("a", "b")

    @pytest.mark.parametrize(
        "op, field, value",
        [
            (UserOperation.REMOVE, "secret_key", "s3cret"),
            (UserOperation.LIST, "member_of", ("devs",)),
            (UserOperation.LIST, "secret_key", "s3cret"),
            (UserOperation.INFO, "secret_key", "s3cret"),
            (UserOperation.ADD, "policy_name", "readwrite"),
            (UserOperation.ENABLE, "user_status", "enabled"),
        ],
    )
    def test_out_of_contract_field_rejected(self, op, field, value) -> None:
        with pytest.raises(ValueError, match=field):
            UserMessage(op=op, access_key="foobar", **{field: value})

    def test_frozen(self) -> None:
        msg = UserMessage.added("foobar", "foo12345")
        with pytest.raises(AttributeError):
            msg.access_key = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

class TestRenderText:
    @pytest.mark.parametrize(
        "msg, expected",
        [
            (UserMessage.added("foobar", "foo12345"), "Added user `foobar` successfully."),
            (UserMessage.removed("foobar"), "Removed user `foobar` successfully."),
            (UserMessage.enabled("foobar"), "Enabled user `foobar` successfully."),
            (UserMessage.disabled("foobar"), "Disabled user `foobar` successfully."),
        ],
    )
    def test_confirmation_sentences(self, msg: UserMessage, expected: str) -> None:
        assert msg.render_text() == expected

    @pytest.mark.parametrize("secret", ["foo12345", "s3cr3t!", "P@ss w0rd", "zz" * 40])
    def test_add_never_shows_secret(self, secret: str) -> None:
        msg = UserMessage.added("alice", secret)
        assert secret not in msg.render_text()
        assert msg.render_text() == "Added user `alice` successfully."

    def test_info_block(self) -> None:
        msg = UserMessage.info(
            "foobar",
            user_status="disabled",
            policy_name="readonly",
            member_of=("devs", "ops"),
        )
        assert msg.render_text() == (
            "AccessKey: foobar\n"
            "Status: disabled\n"
            "PolicyName: readonly\n"
            "MemberOf: devs,ops"
        )

    def test_info_without_groups(self) -> None:
        msg = UserMessage.info("foobar", user_status="enabled", policy_name="")
        assert msg.render_text().splitlines()[-1] == "MemberOf: "

    def test_list_row_layout(self) -> None:
        msg = UserMessage.list_row("foobar", user_status="enabled", policy_name="readwrite")
        row = msg.render_text()
        assert row == "enabled  " + "  " + "foobar".ljust(20) + "  " + "readwrite".ljust(20)
        assert len(row) == 9 + 2 + 20 + 2 + 20

    def test_list_row_truncates_long_values(self) -> None:
        msg = UserMessage.list_row("a" * 30, user_status="enabled", policy_name="p" * 20)
        row = msg.render_text()
        assert row[11:31] == "a" * 17 + "..."
        assert row[33:53] == "p" * 20

    def test_unknown_operation_renders_empty(self) -> None:
        msg = UserMessage.added("foobar", "foo12345")
        object.__setattr__(msg, "op", "bogus")
        assert msg.render_text() == ""

    def test_render_is_idempotent(self) -> None:
        msg = UserMessage.info("foobar", user_status="enabled", policy_name="readwrite")
        assert msg.render_text() == msg.render_text()
        assert msg.render_json() == msg.render_json()

    def test_styles(self) -> None:
        assert UserMessage.added("a", "b").text_style == USER_MESSAGE_STYLE
        assert (
            UserMessage.info("a", user_status="enabled", policy_name="").text_style
            == USER_MESSAGE_STYLE
        )
        assert UserMessage.list_row("a", user_status="enabled", policy_name="").text_style is None


class TestBuildTableRow:
    def test_exact_width_not_truncated(self) -> None:
        assert build_table_row("disabled9", "", "") == "disabled9" + " " * 44

    def test_extra_cells_ignored(self) -> None:
        assert build_table_row("a", "b", "c", "d") == build_table_row("a", "b", "c")


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------

class TestRenderJson:
    def test_add_document(self) -> None:
        text = UserMessage.added("foobar", "foo12345").render_json()
        assert json.loads(text) == {
            "status": "success",
            "accessKey": "foobar",
            "secretKey": "foo12345",
            "userStatus": "enabled",
        }
        assert '"status": "success"' in text
        assert '"secretKey": "foo12345"' in text

    def test_one_space_indent_and_key_order(self) -> None:
        text = UserMessage.removed("foobar").render_json()
        assert text == '{\n "status": "success",\n "accessKey": "foobar"\n}'

    def test_status_forced_to_success(self) -> None:
        msg = UserMessage(op=UserOperation.REMOVE, access_key="foobar", status="failed")
        assert json.loads(msg.render_json())["status"] == "success"

    def test_empty_fields_omitted(self) -> None:
        data = json.loads(
            UserMessage.info("foobar", user_status="enabled", policy_name="").render_json()
        )
        assert "policyName" not in data
        assert "memberOf" not in data
        assert "secretKey" not in data

    def test_status_present_even_when_everything_empty(self) -> None:
        assert json.loads(UserMessage(op=UserOperation.LIST).render_json()) == {
            "status": "success",
        }

    def test_member_of_is_list(self) -> None:
        data = json.loads(
            UserMessage.info(
                "foobar", user_status="enabled", policy_name="p", member_of=("g1",),
            ).render_json()
        )
        assert data["memberOf"] == ["g1"]

    def test_unencodable_value_raises_serialization_error(self) -> None:
        msg = UserMessage.removed("foobar")
        object.__setattr__(msg, "access_key", object())
        with pytest.raises(SerializationError, match="marshal"):
            msg.render_json()

    def test_unknown_operation_still_raises_serialization_error(self) -> None:
        msg = UserMessage.removed("foobar")
        object.__setattr__(msg, "op", "bogus")
        object.__setattr__(msg, "access_key", object())
        with pytest.raises(SerializationError) as exc_info:
            msg.render_json()
        assert exc_info.value.context[0] == "bogus"
