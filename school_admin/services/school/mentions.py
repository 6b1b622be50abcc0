from typing import List

MENTION_PREFIX = "@"


def parse_mentions(text: str) -> List[str]:
    """
    Extract the emails mentioned in a notification.

    Any whitespace separated token starting with "@" is a mention; the
    leading "@" is stripped. The result is not checked for email shape:
    "@notanemail" yields "notanemail", which simply never matches a student.

    >>> parse_mentions("Hello @studentagnes@gmail.com @studentmiche@gmail.com")
    ['studentagnes@gmail.com', 'studentmiche@gmail.com']
    """
    if MENTION_PREFIX not in text:
        return []
    return [
        token[len(MENTION_PREFIX):]
        for token in text.split()
        if token.startswith(MENTION_PREFIX) and len(token) > len(MENTION_PREFIX)
    ]
