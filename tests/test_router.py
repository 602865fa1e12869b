"""Tests for ipguard.decision.router: end-to-end routing, ambiguity flags, error surfacing."""

import logging

import pytest

from entity.policy import AiTrainingPermission, Category, RequiredAction
from ipguard.classification import DEFAULT_RULES
from ipguard.decision import DecisionRouter, resolve_thresholds, route
from ipguard.errors import InvalidInputError, UnclassifiedError


@pytest.fixture
def router():
    return DecisionRouter(cfg={})


def test_ai_plain_image_is_allowed(router, flags):
    result = router.route(flags(is_ai_generated=True))
    assert result.category == 1
    assert result.policy.registration_allowed is True
    assert result.policy.ai_training_permission is AiTrainingPermission.DENIED_FIXED
    assert result.ambiguity_warning is False


def test_ai_ordinary_full_face_needs_review(router, flags):
    result = router.route(flags(is_ai_generated=True, has_human_face=True, is_full_face_visible=True))
    assert result.category == 5
    assert result.policy.registration_allowed is False
    assert result.policy.required_action is RequiredAction.SUBMIT_REVIEW


@pytest.mark.parametrize("face", [False, True])
def test_human_animation_with_brand_needs_review_regardless_of_faces(router, face):
    raw = {
        "isAiGenerated": False,
        "isAnimation": True,
        "hasKnownBrandOrCharacter": True,
        "hasHumanFace": face,
        "isFullFaceVisible": face,
        "isFamousPerson": face,
    }
    result = router.route(raw)
    assert result.category == 15
    assert result.policy.registration_allowed is False
    assert result.policy.required_action is RequiredAction.SUBMIT_REVIEW


def test_human_partial_ordinary_face_is_allowed(router, flags):
    result = router.route(flags(has_human_face=True))
    assert result.category == 11
    assert result.policy.registration_allowed is True
    assert result.policy.ai_training_permission is AiTrainingPermission.ALLOWED_MANUAL


def test_malformed_input_routes_without_raising(router):
    result = router.route({"isAiGenerated": "ya", "hasHumanFace": "tidak"})
    assert result.observation.is_ai_generated is True
    assert result.observation.has_human_face is False
    assert result.category == 1


@pytest.mark.parametrize("raw", [None, "not a mapping", 3.14, ["is_ai_generated"]])
def test_non_mapping_input_raises(router, raw):
    with pytest.raises(InvalidInputError):
        router.route(raw)


def test_selfie_verified_unblocks_selfie_category(router, flags):
    raw = flags(is_ai_generated=True, has_human_face=True, is_famous_person=True, is_full_face_visible=True)
    assert router.route(raw).policy.registration_allowed is False
    assert router.route(raw, selfie_verified=False).policy.registration_allowed is False
    verified = router.route(raw, selfie_verified=True)
    assert verified.category == 3
    assert verified.policy.registration_allowed is True
    assert verified.selfie_verified is True


def test_selfie_verified_does_not_unblock_review_category(router, flags):
    raw = flags(has_known_brand_or_character=True)
    result = router.route(raw, selfie_verified=True)
    assert result.category == 7
    assert result.policy.registration_allowed is False


class TestAmbiguity:
    def test_low_source_confidence_flags_without_changing_category(self, router, flags):
        confident = router.route(flags(is_ai_generated=True, source_confidence=0.9))
        unsure = router.route(flags(is_ai_generated=True, source_confidence=0.3))
        assert confident.ambiguity_warning is False
        assert unsure.ambiguity_warning is True
        assert unsure.low_confidence_fields == ("source",)
        assert unsure.category == confident.category

    def test_threshold_boundary_is_not_ambiguous(self, router, flags):
        assert router.route(flags(animation_confidence=0.5)).ambiguity_warning is False

    def test_absent_confidences_never_flag(self, router, flags):
        assert router.route(flags()).low_confidence_fields == ()

    def test_multiple_low_fields_listed_in_axis_order(self, router, flags):
        result = router.route(flags(brand_confidence=0.1, source_confidence=0.2, face_confidence=0.9))
        assert result.low_confidence_fields == ("source", "brand")

    def test_explicit_thresholds_override_config(self, flags):
        strict = DecisionRouter(thresholds={"face": 0.95}, cfg={})
        assert strict.route(flags(face_confidence=0.9)).low_confidence_fields == ("face",)

    def test_config_thresholds(self, flags):
        cfg = {"router": {"confidence_thresholds": {"brand": 0.2}}}
        lenient = DecisionRouter(cfg=cfg)
        assert lenient.thresholds["brand"] == 0.2
        assert lenient.thresholds["source"] == 0.5
        assert lenient.route(flags(brand_confidence=0.3)).ambiguity_warning is False

    def test_licensing_payload_confidences(self, router):
        result = router.route({
            "source": "AI", "isAnimation": False, "faceType": "Ordinary", "hasBrand": False,
            "conf_source": 0.45, "conf_animation": 0.8, "conf_face": 0.9, "conf_brand": 0.9,
        })
        assert result.category == Category.AI_ORDINARY_PARTIAL_FACE
        assert result.low_confidence_fields == ("source",)

    def test_low_confidence_is_logged(self, router, flags, caplog):
        with caplog.at_level(logging.INFO, logger="ipguard"):
            router.route(flags(source_confidence=0.1))
        assert "low confidence on source" in caplog.text


class TestThresholdValidation:
    @pytest.mark.parametrize("bad", [{"source": 1.5}, {"animation": -0.1}, {"brand": "high"}])
    def test_rejects_bad_values(self, bad):
        with pytest.raises(ValueError):
            DecisionRouter(thresholds=bad, cfg={})

    def test_rejects_unknown_axis(self):
        with pytest.raises(ValueError, match="Unknown confidence axes"):
            resolve_thresholds({}, {"colour": 0.5})


def test_coverage_defect_is_surfaced_and_logged(flags, caplog):
    rules = [r for r in DEFAULT_RULES if r.category is not Category.AI_PLAIN]
    router = DecisionRouter(cfg={}, rules=rules)
    with caplog.at_level(logging.ERROR, logger="ipguard"):
        with pytest.raises(UnclassifiedError) as exc_info:
            router.route(flags(is_ai_generated=True))
    assert exc_info.value.observation.is_ai_generated is True
    assert "coverage defect" in caplog.text


def test_result_serializes_to_json_ready_dict(router, flags):
    d = router.route(flags(is_ai_generated=True, source_confidence=0.2)).to_dict()
    assert d["category"] == 1
    assert d["category_name"] == "AI_PLAIN"
    assert d["policy"]["required_action"] == "None"
    assert d["policy"]["ai_training_permission"] == "Denied_Fixed"
    assert d["ambiguity_warning"] is True
    assert d["details"]["source_confidence"] == 0.2
    assert "selfie_verified" not in d


def test_module_level_route_uses_shared_router(flags):
    assert route(flags(is_animation=True)).category == Category.HUMAN_ANIMATION


def test_flat_observation_with_stray_source_key_is_not_fatal(router):
    result = router.route({"isAiGenerated": True, "source": "camera-upload"})
    assert result.category == Category.AI_PLAIN


def test_flat_keys_win_over_source_field(router):
    result = router.route({"is_ai_generated": False, "has_human_face": True, "source": "AI"})
    assert result.category == Category.HUMAN_ORDINARY_PARTIAL_FACE


@pytest.mark.parametrize(
    "payload, category",
    [
        ({"source": "AI", "isAnimation": "ya", "faceType": "None", "hasBrand": "tidak"}, Category.AI_ANIMATION),
        ({"source": "Human", "faceType": "None"}, Category.HUMAN_ORDINARY_PARTIAL_FACE),
        ({"source": "AI", "faceType": "Celebrity", "hasBrand": None}, Category.AI_PLAIN),
    ],
)
def test_malformed_licensing_fields_never_raise(router, payload, category):
    assert router.route(payload).category == category
