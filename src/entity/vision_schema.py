from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# LLM JSON is untrusted: flags may arrive as bool, 0/1 or "yes"/"ya"/"tidak"
LooseFlag = Optional[Union[bool, int, float, str]]


class VisionAnalysis(BaseModel):
    """Raw attribute analysis returned by the vision model (before normalization)."""
    model_config = ConfigDict(extra="allow")

    is_ai_generated: LooseFlag = None
    is_animation: LooseFlag = None
    has_human_face: LooseFlag = None
    is_full_face_visible: LooseFlag = None
    is_famous_person: LooseFlag = None
    has_known_brand_or_character: LooseFlag = None
    source_confidence: Optional[Union[float, str]] = None
    animation_confidence: Optional[Union[float, str]] = None
    face_confidence: Optional[Union[float, str]] = None
    brand_confidence: Optional[Union[float, str]] = None
    title: Optional[str] = None
    description: Optional[str] = None


class LicensingRouterInput(BaseModel):
    """
    Tri-state payload of the licensing recommendation router (source / faceType / hasBrand),
    after normalization. Missing flags default to False and a missing face type to "None".
    """
    model_config = ConfigDict(populate_by_name=True)

    source: Literal["AI", "Human"]
    is_animation: bool = Field(False, alias="isAnimation")
    face_type: Literal["None", "Ordinary", "Famous"] = Field("None", alias="faceType")
    has_brand: bool = Field(False, alias="hasBrand")
    conf_source: Optional[float] = None
    conf_animation: Optional[float] = None
    conf_face: Optional[float] = None
    conf_brand: Optional[float] = None
