"""Tests for generate-image argument validation."""

from __future__ import annotations

import logging

import pytest

from core.exceptions import ValidationError
from features.image.validation import (
    validate_generation_arguments,
    validate_guidance_scale,
    validate_model,
    validate_num_images,
)


def test_defaults_are_applied_for_prompt_only_call():
    request = validate_generation_arguments({"prompt": "a red apple"})

    assert request.prompt == "a red apple"
    assert request.image_size == "landscape_4_3"
    assert request.num_inference_steps == 28
    assert request.guidance_scale == 3.5
    assert request.num_images == 1
    assert request.enable_safety_checker is True
    assert request.model == "fal-ai/recraft-v3"


@pytest.mark.parametrize("arguments", [None, {}, {"prompt": ""}, {"prompt": "   "}, {"prompt": 42}])
def test_prompt_is_required(arguments):
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_arguments(arguments)

    assert exc_info.value.field == "prompt"


def test_invalid_image_size_lists_every_allowed_value():
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_arguments({"prompt": "x", "image_size": "huge"})

    error = exc_info.value
    assert error.field == "image_size"
    assert "huge" in error.message
    for size in (
        "square_hd",
        "square",
        "portrait_4_3",
        "portrait_16_9",
        "landscape_4_3",
        "landscape_16_9",
    ):
        assert size in error.message


def test_num_images_above_maximum_names_the_maximum():
    with pytest.raises(ValidationError) as exc_info:
        validate_num_images(10)

    assert exc_info.value.field == "num_images"
    assert "maximum of 5" in exc_info.value.message


@pytest.mark.parametrize("value", [0, -2, 2.5, "3", True])
def test_num_images_rejects_out_of_range_and_non_integers(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_num_images(value)

    assert exc_info.value.field == "num_images"


def test_num_images_accepts_the_boundaries():
    assert validate_num_images(1) == 1
    assert validate_num_images(5) == 5


def test_safety_checker_requires_a_real_boolean():
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_arguments({"prompt": "x", "enable_safety_checker": "true"})

    assert exc_info.value.field == "enable_safety_checker"


def test_safety_checker_can_be_disabled():
    request = validate_generation_arguments({"prompt": "x", "enable_safety_checker": False})

    assert request.enable_safety_checker is False


@pytest.mark.parametrize(
    ("arguments", "field"),
    [
        ({"num_inference_steps": 0}, "num_inference_steps"),
        ({"num_inference_steps": "many"}, "num_inference_steps"),
        ({"guidance_scale": -1}, "guidance_scale"),
        ({"guidance_scale": False}, "guidance_scale"),
    ],
)
def test_numeric_tuning_parameters_must_be_positive(arguments, field):
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_arguments({"prompt": "x", **arguments})

    assert exc_info.value.field == field


def test_integer_guidance_scale_is_converted_to_float():
    assert validate_guidance_scale(7) == 7.0


def test_first_failing_parameter_is_reported():
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_arguments({"prompt": "", "image_size": "huge", "num_images": 10})

    assert exc_info.value.field == "prompt"


def test_unlisted_model_is_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="features.image.validation"):
        request = validate_generation_arguments({"prompt": "x", "model": "fal-ai/flux/dev"})

    assert request.model == "fal-ai/flux/dev"
    assert any("fal-ai/flux/dev" in record.getMessage() for record in caplog.records)


def test_listed_model_logs_no_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="features.image.validation"):
        assert validate_model("fal-ai/kolors") == "fal-ai/kolors"

    assert caplog.records == []


@pytest.mark.parametrize("value", ["", "  ", 3])
def test_model_must_be_a_non_empty_string(value):
    with pytest.raises(ValidationError) as exc_info:
        validate_model(value)

    assert exc_info.value.field == "model"
