# app/services/gemini.py
import json
import logging
import re
from typing import List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from blueprint.layout import HouseLayout

logger = logging.getLogger(__name__)


class TransformError(Exception):
    """The model call failed or returned something that is not a layout."""


SYSTEM_INSTRUCTION = """
You are an expert architect AI specialized in 2D floor plan generation for multi-story houses.
Your task is to modify a JSON structure representing a house layout based on a user's natural language request.

COORDINATE SYSTEM:
- The layout is a 2D cartesian plane.
- Top-Left is (0,0).
- X-axis increases to the RIGHT (South).
- Y-axis increases DOWNWARDS (West).
- "Left edge" corresponds to North (x=0).
- "Top edge" corresponds to East (y=0).

STRUCTURE:
- The layout contains 'land' dimensions and an array of 'floors'.
- Each 'floor' has an id, name, and a list of 'rooms'.
- Rooms sharing a name are parts of one room (e.g. an L-shaped room split into rectangles).

INPUT:
- Current Layout JSON.
- User Instruction (e.g., "Add a bathroom on the 2nd floor", "Resize garage").

OUTPUT:
- A valid JSON object matching the input structure with the requested modifications.
- Ensure structural walls often align between floors (e.g., external walls).
- Ensure rooms do not unintentionally overlap unless specified.
- Ensure rooms generally stay within the land boundaries (0,0) to (land.width, land.height).
- Recalculate positions (x,y) and dimensions (width,height) accurately.
"""

_ROOM_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "name": {"type": "STRING"},
        "x": {"type": "NUMBER"},
        "y": {"type": "NUMBER"},
        "width": {"type": "NUMBER"},
        "height": {"type": "NUMBER"},
        "color": {"type": "STRING"},
        "description": {"type": "STRING"},
    },
    "required": ["id", "name", "x", "y", "width", "height", "color"],
}

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "land": {
            "type": "OBJECT",
            "properties": {"width": {"type": "NUMBER"}, "height": {"type": "NUMBER"}},
            "required": ["width", "height"],
        },
        "floors": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "id": {"type": "STRING"},
                    "name": {"type": "STRING"},
                    "rooms": {"type": "ARRAY", "items": _ROOM_SCHEMA},
                },
                "required": ["id", "name", "rooms"],
            },
        },
    },
    "required": ["land", "floors"],
}


# Stricter shapes for what the model must send back: color is mandatory there.
class _ReturnedRoom(BaseModel):
    id: str
    name: str
    x: float
    y: float
    width: float
    height: float
    color: str
    description: Optional[str] = None


class _ReturnedFloor(BaseModel):
    id: str
    name: str
    rooms: List[_ReturnedRoom]


class _ReturnedLand(BaseModel):
    width: float
    height: float


class _ReturnedLayout(BaseModel):
    land: _ReturnedLand
    floors: List[_ReturnedFloor]


def extract_json_from_response(text: str):
    """Extract JSON from AI response that might contain markdown or extra text"""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = re.search(r"```(?:json)?\s*(\{.*\})\s*```", text, re.DOTALL)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass

    # Outermost braces; layouts nest too deeply for a balanced-brace regex.
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        return json.loads(text[start:end + 1])
    raise json.JSONDecodeError("No valid JSON found in response", text, 0)


def parse_layout(text: str) -> HouseLayout:
    if not isinstance(text, str) or not text.strip():
        raise TransformError("No response from AI")
    try:
        data = extract_json_from_response(text)
        returned = _ReturnedLayout.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise TransformError(f"Malformed layout from AI: {exc}") from exc
    return HouseLayout.model_validate(returned.model_dump())


class GeminiLayoutTransformer:
    """
    Sends the current layout plus a free-text instruction to Gemini and
    returns the layout it proposes. Credentials come from the caller.
    """

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash",
                 base_url: str = "https://generativelanguage.googleapis.com/v1beta",
                 timeout: float = 60.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config) -> "GeminiLayoutTransformer":
        return cls(
            api_key=config.GEMINI_API_KEY,
            model=config.GEMINI_MODEL,
            base_url=config.GEMINI_BASE_URL,
            timeout=config.GEMINI_TIMEOUT,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, layout: HouseLayout, instruction: str) -> dict:
        prompt = (
            f"Current Layout: {layout.model_dump_json(exclude_none=True)}\n"
            f"User Instruction: {instruction}"
        )
        return {
            "system_instruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "response_mime_type": "application/json",
                "response_schema": RESPONSE_SCHEMA,
            },
        }

    async def transform(self, layout: HouseLayout, instruction: str) -> HouseLayout:
        if not self.api_key:
            raise TransformError("GEMINI_API_KEY is not configured")

        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        payload = self.build_payload(layout.snapshot(), instruction)

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                resp = await client.post(self.url, headers=headers, json=payload)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("Gemini request failed: %s", e)
            raise TransformError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise TransformError(f"Gemini returned a non-JSON body: {e}") from e

        try:
            model_text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.warning("Unexpected Gemini response format: %s", e)
            raise TransformError("No response from AI") from e

        logger.debug("Raw AI response: %s", model_text)
        return parse_layout(model_text)
