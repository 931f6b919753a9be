import pytest
from pydantic import ValidationError

from line_offset.config.models import FeatureModel, JobModel, LineStringModel, geometry_adapter


def test_job_defaults():
    job = JobModel.model_validate({"offset": {"offset": 2}})
    assert (job.input, job.output) == ("-", "-")
    assert job.offset.units == "kilometers"
    assert job.log.level == "INFO"
    assert job.log.debug is False


def test_job_expands_user_paths(monkeypatch):
    monkeypatch.setenv("HOME", "/home/u")
    monkeypatch.setenv("LINE_DIR", "/data")
    job = JobModel.model_validate(
        {"input": "~/a.geojson", "output": "$LINE_DIR/b.geojson", "offset": {"offset": 1}}
    )
    assert job.input == "/home/u/a.geojson"
    # environment variables are left alone
    assert job.output == "$LINE_DIR/b.geojson"


@pytest.mark.parametrize(
    "cfg",
    [
        {"offset": {"offset": 1, "units": "furlongs"}},
        {"offset": {"offset": float("nan")}},
        {"offset": {"offset": "1"}},
        {"offset": {"offset": 1}, "speed": 3},
        {"offset": {"offset": 1}, "log": {"level": "TRACE"}},
    ],
)
def test_job_rejects_bad_config(cfg):
    with pytest.raises(ValidationError):
        JobModel.model_validate(cfg)


def test_geometry_discriminates_on_type():
    geom = {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}
    assert isinstance(geometry_adapter.validate_python(geom), LineStringModel)
    feat = geometry_adapter.validate_python({"type": "Feature", "geometry": geom, "id": 7})
    assert isinstance(feat, FeatureModel)
    assert feat.properties is None


def test_positions_are_two_dimensional():
    with pytest.raises(ValidationError):
        LineStringModel.model_validate({"type": "LineString", "coordinates": [[0, 0, 5], [1, 1, 5]]})
