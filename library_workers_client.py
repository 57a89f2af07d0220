"""Library Workers API client.

A thin wrapper around the HTTP API served by ``library_workers_api``.
It uses the ``requests`` library and exposes one method per endpoint:

* :meth:`create_book`, :meth:`list_books`, :meth:`delete_book`
* :meth:`list_workers`, :meth:`add_worker`
* :meth:`list_workers_by_work_name`, :meth:`add_worker_to_list`

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is an empty value and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  Network errors
are logged and reported the same way (with ``status_code`` set to
``None``) rather than raised, so callers can branch on a single shape.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LibraryWorkersAPI:
    """Client for the books and workers endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including any mount prefix,
                e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            on success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------
    def create_book(self, isbn: str, title: str, author: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a book.

        Returns:
            A tuple ``(confirmation, error)``.
        """
        payload = {"isbn": isbn, "title": title, "author": author}
        return self._request("POST", "/books", json_body=payload)

    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all books.  An empty list is a valid result."""
        return self._list("/books")

    def delete_book(self, isbn: str) -> Tuple[bool, Optional[Error]]:
        """Delete every book with the given ISBN.

        Returns:
            ``(True, None)`` when at least one book was removed.  A 404
            from the API yields ``(False, error)``.
        """
        _, error = self._request("DELETE", f"/books/{quote(isbn, safe='')}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------
    def list_workers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all workers, short and detailed."""
        return self._list("/workers")

    def add_worker(self, name: str, img_url: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a worker in its short form."""
        payload = {"imgUrl": img_url, "nameOfWorker": name}
        return self._request("POST", "/addWorker", json_body=payload)

    def list_workers_by_work_name(self, work_name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve workers offering ``work_name``.

        The API answers 404 when nobody matches; that is returned as an
        empty list together with the error.
        """
        return self._list(f"/workers/{quote(work_name, safe='')}")

    def add_worker_to_list(
        self,
        *,
        name: str,
        work_name: str,
        img_url: str,
        latitude: float,
        longitude: float,
        cost_per_hour: int,
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Add a detailed worker.

        Returns:
            A tuple ``(worker_id, error)`` where ``worker_id`` is the
            identifier assigned by the store.
        """
        payload = {
            "name": name,
            "workName": work_name,
            "imgUrl": img_url,
            "coordinatesOfWorker": {"latitude": latitude, "longitude": longitude},
            "costPerHour": cost_per_hour,
        }
        data, error = self._request("POST", "/addWorkerToList", json_body=payload)
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("id"), None
        return None, None
