"""Unit tests for life-stage classification."""

import pytest

from age_classifier.calculator import AgeCalculator, LifeStage, classify


@pytest.mark.unit
class TestClassify:
    @pytest.mark.parametrize(
        "years, expected",
        [
            (0, LifeStage.BABY),
            (2, LifeStage.BABY),
            (3, LifeStage.CHILD),
            (12, LifeStage.CHILD),
            (13, LifeStage.TEEN),
            (19, LifeStage.TEEN),
            (20, LifeStage.ADULT),
            (59, LifeStage.ADULT),
            (60, LifeStage.SENIOR),
            (130, LifeStage.SENIOR),
        ],
    )
    def test_bucket_boundaries(self, years, expected):
        assert classify(years) is expected

    def test_stage_compares_equal_to_plain_name(self):
        assert classify(0) == "Baby"
        assert classify(45) == "Adult"

    def test_class_exposes_same_function(self):
        assert AgeCalculator.classify(15) is LifeStage.TEEN


@pytest.mark.unit
class TestLifeStageLabel:
    @pytest.mark.parametrize(
        "stage, label",
        [
            (LifeStage.BABY, "Baby (0-2)"),
            (LifeStage.CHILD, "Child (3-12)"),
            (LifeStage.TEEN, "Teen (13-19)"),
            (LifeStage.ADULT, "Adult (20-59)"),
            (LifeStage.SENIOR, "Senior (60+)"),
        ],
    )
    def test_label_includes_range(self, stage, label):
        assert stage.label == label

    def test_every_stage_has_a_label(self):
        for stage in LifeStage:
            assert stage.label.startswith(stage.value)
