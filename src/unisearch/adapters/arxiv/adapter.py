"""arXiv adapter — Academic paper search via the arXiv export API.

The API answers with an Atom 1.0 feed. Papers can be searched with a query
(``search_query``) or looked up directly by identifier (``id_list``), so this
is the one adapter that accepts ``SearchRequest.id_list`` in place of a query.

API reference: https://info.arxiv.org/help/api/user-manual.html
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Any, Literal

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import ConfigurationError, ParseError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "http://export.arxiv.org/api/query"

_NS = {
    "atom": "http://www.w3.org/2005/Atom",
    "opensearch": "http://a9.com/-/spec/opensearch/1.1/",
    "arxiv": "http://arxiv.org/schemas/atom",
}

_WHITESPACE = re.compile(r"\n\s*")


def _text(element: ET.Element, path: str) -> str:
    found = element.find(path, _NS)
    return (found.text or "").strip() if found is not None else ""


def _squash(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


class ArxivAdapter(SearchAdapter):
    """Search adapter for arXiv.

    Args:
        sort_by: Default sort field (``relevance``, ``lastUpdatedDate``, ``submittedDate``).
        sort_order: Default sort direction (``ascending`` or ``descending``).
        base_url: API endpoint.
        transport: HTTP transport.
    """

    label = "Arxiv"
    accepts_id_list = True

    def __init__(
        self,
        sort_by: Literal["relevance", "lastUpdatedDate", "submittedDate"] = "relevance",
        sort_order: Literal["ascending", "descending"] = "descending",
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport)
        self._sort_by = sort_by
        self._sort_order = sort_order
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "arxiv"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        if not request.query and not request.id_list:
            raise ConfigurationError('Arxiv search requires either a "query" or an "id_list".')

        params: dict[str, Any] = {
            "search_query": request.query,
            "id_list": request.id_list,
            "start": request.start,
            "max_results": request.max_results,
            "sortBy": request.sort_by or self._sort_by,
            "sortOrder": request.sort_order or self._sort_order,
        }

        debug.log_request(request.debug, "Arxiv Search request", {"url": self._base_url, "params": params})

        xml_text = await self._transport.get(
            self._base_url,
            params=params,
            headers={"Accept": "application/atom+xml"},
            timeout=request.timeout,
            parse="text",
        )
        debug.log(request.debug, "Arxiv raw XML response received", {"length": len(xml_text)})

        results, total = self.parse_feed(xml_text)

        debug.log_response(
            request.debug,
            "Arxiv Search successful",
            {"itemCount": len(results), "totalResults": total},
        )
        return results

    def parse_feed(self, xml_text: str) -> tuple[list[SearchResult], int]:
        """Parse an Atom feed into results plus the reported total.

        Raises:
            ParseError: If the document is not well-formed XML.
        """
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise ParseError(f"Invalid Atom XML: {e}") from e

        try:
            total = int(_text(root, "opensearch:totalResults") or 0)
        except ValueError:
            total = 0

        return [self.map_entry(entry) for entry in root.findall("atom:entry", _NS)], total

    def map_entry(self, entry: ET.Element) -> SearchResult:
        """Map an Atom ``<entry>`` to ``SearchResult``, preferring the PDF link."""
        links = entry.findall("atom:link", _NS)
        url = ""
        for link in links:
            if link.get("title") == "pdf":
                url = link.get("href", "")
                break
        else:
            for link in links:
                if link.get("rel") == "alternate" and link.get("type") == "text/html":
                    url = link.get("href", "").replace("/abs/", "/pdf/")
                    break

        primary = entry.find("arxiv:primary_category", _NS)
        raw = {
            "id": _text(entry, "atom:id"),
            "updated": _text(entry, "atom:updated"),
            "published": _text(entry, "atom:published"),
            "authors": [_text(author, "atom:name") for author in entry.findall("atom:author", _NS)],
            "categories": [c.get("term") for c in entry.findall("atom:category", _NS)],
            "primary_category": primary.get("term") if primary is not None else None,
            "comment": _text(entry, "arxiv:comment") or None,
            "journal_ref": _text(entry, "arxiv:journal_ref") or None,
            "doi": _text(entry, "arxiv:doi") or None,
        }

        return SearchResult(
            url=url or raw["id"],
            title=_squash(_text(entry, "atom:title")),
            snippet=_squash(_text(entry, "atom:summary")),
            domain="arxiv.org",
            published_date=raw["published"] or raw["updated"] or None,
            provider=self.name,
            raw=raw,
        )
