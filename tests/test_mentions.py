from school_admin.services.school.mentions import parse_mentions


def test_no_at_sign_returns_empty_list():
    assert parse_mentions("hello") == []


def test_extracts_every_mention():
    assert set(parse_mentions("hello @a@x.com @b@x.com")) == {"a@x.com", "b@x.com"}


def test_only_tokens_starting_with_at_are_mentions():
    # an email in the middle of the text is not a mention
    assert parse_mentions("mail a@x.com or ping @b@x.com") == ["b@x.com"]


def test_any_whitespace_separates_tokens():
    assert parse_mentions("Hey\n@a@x.com\t@b@x.com  done") == ["a@x.com", "b@x.com"]


def test_malformed_mentions_are_kept():
    # shape is not checked here, the recipient lookup filters them out
    assert parse_mentions("hi @notanemail") == ["notanemail"]


def test_lone_at_sign_is_not_a_mention():
    assert parse_mentions("meet @ noon") == []


def test_empty_text():
    assert parse_mentions("") == []
