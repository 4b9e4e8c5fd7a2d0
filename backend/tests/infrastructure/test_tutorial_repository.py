"""Tutorial Repository: id parsing and title-filter escaping."""

from uuid import uuid4

import pytest

from app.core.errors import InvalidIdentifierError
from app.infrastructure.tutorial_repository import escape_like, parse_tutorial_id


def test_parse_well_formed_id():
    uid = uuid4()
    assert parse_tutorial_id(str(uid)) == uid


@pytest.mark.parametrize("raw", ["invalid-id", "", "507f1f77bcf86cd799439011"])
def test_parse_malformed_id_raises(raw):
    with pytest.raises(InvalidIdentifierError):
        parse_tutorial_id(raw)


def test_escape_like_escapes_wildcards():
    assert escape_like("100%_a\\b") == "100\\%\\_a\\\\b"


def test_escape_like_leaves_plain_text():
    assert escape_like("Angular") == "Angular"
