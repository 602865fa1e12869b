"""Vision attribute extractor: one image -> raw attribute mapping via a LangChain chat model."""

from __future__ import annotations

import base64
from typing import Any, Dict, Optional

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import ValidationError

from commons.config import config as default_config
from commons.config import get_section
from commons.constants import Constants as Co
from commons.llm import get_llm
from commons.logging_utils import get_logger

from entity.vision_schema import VisionAnalysis
from ipguard.errors import ImageTooLargeError, InvalidInputError, VisionParseError
from ipguard.extractors._json import extract_json_from_llm_output

logger = get_logger(__name__)

DEFAULT_MAX_IMAGE_BYTES = 8 * 1024 * 1024
DEFAULT_MAX_OUTPUT_TOKENS = 300

VISION_INSTRUCTION = (
    "You are an AI image analyzer. Return ONLY strict minified JSON with keys: "
    "is_ai_generated, is_animation, has_human_face, is_full_face_visible, is_famous_person, "
    "has_known_brand_or_character, source_confidence, animation_confidence, face_confidence, "
    "brand_confidence, title, description. "
    "Definitions: is_animation = TRUE for 2D/3D animated/cartoon/illustration style (anime, toon, CGI), "
    "FALSE for photographic/realistic renders. is_full_face_visible = TRUE only if a single human face "
    "is clearly visible facing the camera with both eyes, nose, mouth and chin unobstructed, and the full "
    "head (forehead to chin) is not cropped; side/angle >45 degrees, heavy occlusion (mask, big sunglasses "
    "obscuring eyes), or any crop that cuts forehead/chin/ears => FALSE. If has_human_face is FALSE, "
    "is_full_face_visible must be FALSE. Each *_confidence is a number between 0 and 1 for the matching "
    "judgement (source = AI vs human origin). For title: concise 3-6 words describing the image. "
    "For description: 1-2 sentences summarizing what is depicted. Use true/false booleans for flags. "
    "No extra text."
)


def image_data_url(image_bytes: bytes, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"


class VisionAttributeExtractor:
    """
    Ask a vision chat model for the attribute flags of one image.
    The reply is parsed loosely; values stay untyped here and are normalized by the router.
    """

    def __init__(
        self,
        llm: Any = None,
        instruction: Optional[str] = None,
        cfg: Optional[Dict[str, Any]] = None,
    ):
        cfg = default_config if cfg is None else cfg
        vision_cfg = get_section(cfg, Co.VISION)
        self.max_image_bytes = int(vision_cfg.get("max_image_bytes") or DEFAULT_MAX_IMAGE_BYTES)
        max_tokens = int(vision_cfg.get("max_output_tokens") or DEFAULT_MAX_OUTPUT_TOKENS)
        self.llm = llm if llm is not None else get_llm(max_tokens=max_tokens)
        self.instruction = instruction or VISION_INSTRUCTION
        self.prompt = ChatPromptTemplate.from_messages([
            ("system", "{instruction}"),
            ("human", [{"type": "image_url", "image_url": {"url": "{image_url}"}}]),
        ])
        self.chain = self.prompt | self.llm | StrOutputParser()

    def _check_image(self, image_bytes: bytes) -> None:
        if not image_bytes:
            raise InvalidInputError("No image data received", image_bytes)
        if len(image_bytes) > self.max_image_bytes:
            raise ImageTooLargeError(len(image_bytes), self.max_image_bytes)

    def extract(self, image_bytes: bytes, mime_type: str = "image/png") -> Dict[str, Any]:
        self._check_image(image_bytes)
        text = self.chain.invoke({
            "instruction": self.instruction,
            "image_url": image_data_url(image_bytes, mime_type),
        })
        return self.parse(text)

    def parse(self, text: str) -> Dict[str, Any]:
        """Parse the model reply into a raw attribute dict. Raises VisionParseError when no object is found."""
        text = (text or "").strip()
        data = extract_json_from_llm_output(text)
        if data is None:
            snippet = (text[:200] + "…") if len(text) > 200 else text
            logger.warning("Vision output parse failed; raw reply: %r", snippet)
            raise VisionParseError("No JSON object in vision model output", raw_text=text)
        try:
            analysis = VisionAnalysis.model_validate(data)
        except ValidationError as e:
            # Drop fields of unusable type; the router treats missing flags as False
            bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
            logger.warning("Vision output had malformed fields %s; ignoring them", sorted(map(str, bad)))
            analysis = VisionAnalysis.model_validate({k: v for k, v in data.items() if k not in bad})
        out = analysis.model_dump(exclude_none=True)
        out["title"] = analysis.title or ""
        out["description"] = analysis.description or ""
        return out
