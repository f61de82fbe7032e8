"""JSON/XML content negotiation for city resources.

Responses are XML when the ``Accept`` header prefers ``application/xml`` or
``text/xml`` and JSON otherwise. Request bodies are read according to their
``Content-Type``.
"""
import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, tostring

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.exceptions import CityValidationError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPES = ("application/xml", "text/xml")

# Wildcards resolve to the first concrete type we can produce for them
_WILDCARDS = {
    "*/*": JSON_MEDIA_TYPE,
    "application/*": JSON_MEDIA_TYPE,
    "text/*": "text/xml",
}


def _parse_accept(accept: str) -> List[Tuple[str, float]]:
    entries = []
    for part in accept.split(","):
        pieces = [p.strip() for p in part.split(";")]
        media = pieces[0].lower()
        if not media:
            continue
        quality = 1.0
        for param in pieces[1:]:
            key, _, value = param.partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        entries.append((media, quality))
    # sorted() is stable, so equal weights keep header order
    return sorted(entries, key=lambda entry: -entry[1])


def negotiate_media_type(accept: Optional[str]) -> str:
    """Pick the response media type for an ``Accept`` header."""
    if not accept:
        return JSON_MEDIA_TYPE
    for media, quality in _parse_accept(accept):
        if quality <= 0:
            continue
        if media == JSON_MEDIA_TYPE or media in XML_MEDIA_TYPES:
            return media
        if media in _WILDCARDS:
            return _WILDCARDS[media]
    return JSON_MEDIA_TYPE


def is_xml(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media = content_type.split(";")[0].strip().lower()
    return media in XML_MEDIA_TYPES or media.endswith("+xml")


# ==============================================================================
# XML ENCODING
# ==============================================================================

def _text(parent: Element, tag: str, value: Any) -> None:
    if value is None:
        return
    SubElement(parent, tag).text = str(value)


def _links_element(parent: Element, links: List[Dict[str, str]]) -> None:
    links_el = SubElement(parent, "links")
    for link in links:
        SubElement(links_el, "link", rel=link["rel"], href=link["href"])


def _city_element(parent: Optional[Element], data: Dict[str, Any]) -> Element:
    city_el = Element("city") if parent is None else SubElement(parent, "city")
    _text(city_el, "id", data["id"])
    _text(city_el, "name", data["name"])
    _text(city_el, "desc", data.get("desc"))
    loc_el = SubElement(city_el, "loc")
    _text(loc_el, "longitude", data["loc"]["longitude"])
    _text(loc_el, "latitude", data["loc"]["latitude"])
    _links_element(city_el, data.get("links", []))
    return city_el


def city_to_xml(data: Dict[str, Any]) -> bytes:
    """Encode a dumped CityResourceSchema."""
    return tostring(_city_element(None, data), encoding="utf-8", xml_declaration=True)


def collection_to_xml(data: Dict[str, Any]) -> bytes:
    """Encode a dumped CityCollectionSchema."""
    root = Element("cities")
    _links_element(root, data.get("links", []))
    for item in data.get("content", []):
        _city_element(root, item)
    return tostring(root, encoding="utf-8", xml_declaration=True)


# ==============================================================================
# XML DECODING
# ==============================================================================

def _element_to_value(element: Element) -> Any:
    children = list(element)
    if not children:
        return element.text or ""
    return {child.tag: _element_to_value(child) for child in children}


def xml_to_dict(body: bytes) -> Dict[str, Any]:
    """Decode an XML request body into the same shape as its JSON form."""
    try:
        root = fromstring(body)
    except ParseError as e:
        raise CityValidationError("body", f"malformed XML: {e}") from e
    value = _element_to_value(root)
    return value if isinstance(value, dict) else {}


# ==============================================================================
# REQUEST / RESPONSE
# ==============================================================================

async def read_payload(request: Request) -> Dict[str, Any]:
    """Read the request body as a dict; an empty body is an empty dict."""
    body = await request.body()
    if not body.strip():
        return {}

    if is_xml(request.headers.get("content-type")):
        return xml_to_dict(body)

    try:
        payload = json.loads(body)
    except ValueError as e:
        raise CityValidationError("body", f"malformed JSON: {e}") from e
    if not isinstance(payload, dict):
        raise CityValidationError("body", "must be a JSON object", payload)
    return payload


def render(
    request: Request,
    payload: BaseModel,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """Serialize a resource or collection schema for the negotiated media type."""
    data = payload.model_dump(by_alias=True, mode="json")
    media_type = negotiate_media_type(request.headers.get("accept"))

    if media_type in XML_MEDIA_TYPES:
        content = collection_to_xml(data) if "content" in data else city_to_xml(data)
        return Response(
            content=content,
            status_code=status_code,
            headers=headers,
            media_type=media_type,
        )
    return JSONResponse(content=data, status_code=status_code, headers=headers)
