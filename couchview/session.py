import contextlib
import logging

import requests.exceptions
from requests_toolbelt import sessions

from couchview import exceptions

log = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@contextlib.contextmanager
def translate_errors():
    """Re-raise ``requests`` failures as the matching package exceptions."""
    try:
        yield
    except requests.exceptions.HTTPError as exc:
        raise exceptions.http_error_lookup(exc.response.status_code, exc.response.reason) from exc
    except requests.exceptions.Timeout as exc:
        raise exceptions.Timeout(str(exc)) from exc
    except requests.exceptions.RequestException as exc:
        raise exceptions.RequestsException(str(exc)) from exc


class Session(object):
    """Wrapper around BaseUrlSession that automatically wraps certain exceptions when making requests"""

    def __init__(self, base_url=None):
        self._base_session = sessions.BaseUrlSession(base_url=base_url)

    def request(self, method, url, *args, **kwargs):
        log.debug("%s %s", method, url)
        with translate_errors():
            resp = self._base_session.request(method, str(url), *args, **kwargs)
            resp.raise_for_status()
        return resp

    def get(self, url, **kwargs):
        return self.request("GET", url=url, **kwargs)

    def iter_body(self, resp, chunk_size=CHUNK_SIZE):
        """Yield the raw body of a streamed response chunk by chunk.

        Failures while reading (a dropped connection, a broken chunked
        encoding) are raised as `RequestsException`.
        """
        with translate_errors():
            for chunk in resp.iter_content(chunk_size=chunk_size):
                if chunk:
                    yield chunk

    def close(self):
        self._base_session.close()
