from requests import Session

from config import USER_AGENT


def get_http_client(*, headers: dict | None = None) -> Session:
    if not headers:
        headers = {}

    s = Session()
    s.headers.update({
        'User-Agent': USER_AGENT,
        'Accept-Encoding': 'gzip, deflate',
    } | headers)

    return s


def plural(count: int, word: str) -> str:
    return f'{count} {word}{"" if count == 1 else "s"}'
