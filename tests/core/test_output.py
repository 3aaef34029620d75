"""Unit tests for result rendering."""

import json

import pytest

from coreapp_detect.output import format_json, format_result
from coreapp_detect.types import ConfigInfo


@pytest.mark.parametrize(
    "config, expected",
    [
        (
            ConfigInfo(version="net5.0", path="MyApp.csproj", app_name="MyApp", ports=[5000], http_port=5000),
            '{"csprojPath":  "MyApp.csproj", "ports": [5000], "httpPort": 5000, "appName": "MyApp"}',
        ),
        (
            ConfigInfo(version="net5.0", path="src/Api/Api.csproj", app_name="Api"),
            '{"csprojPath":  "src/Api/Api.csproj", "ports": [], "httpPort": 0, "appName": "Api"}',
        ),
        (
            ConfigInfo(path="A.csproj", app_name="A", ports=[5000, 5000, 6000], http_port=6000, https_port=7001),
            '{"csprojPath":  "A.csproj", "ports": [5000,5000,6000], "httpPort": 6000, "appName": "A"}',
        ),
    ],
)
def test_format_result(config, expected):
    assert format_result(config) == expected


def test_format_result_is_valid_json():
    config = ConfigInfo(path="MyApp.csproj", app_name="MyApp", ports=[5000, 5001], http_port=5001)

    assert json.loads(format_result(config)) == {
        "csprojPath": "MyApp.csproj",
        "ports": [5000, 5001],
        "httpPort": 5001,
        "appName": "MyApp",
    }


def test_format_json_includes_https_port():
    config = ConfigInfo(version="net5.0", path="MyApp.csproj", app_name="MyApp", ports=[5000], http_port=5000, https_port=5001)

    assert json.loads(format_json(config)) == {
        "version": "net5.0",
        "csprojPath": "MyApp.csproj",
        "appName": "MyApp",
        "ports": [5000],
        "httpPort": 5000,
        "httpsPort": 5001,
    }
