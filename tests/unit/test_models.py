"""Unit tests for the wire models."""

import json

import pytest
from pydantic import ValidationError

from docker_manager.core.domain.models import (
    CheckContainerStatusBody,
    CreateContainerBody,
    CreateContainerResponseBody,
    GenerateExecInstanceBody,
    StartExecInstanceBody,
)


class TestRequestBodies:
    def test_create_container_uses_wire_names(self):
        body = CreateContainerBody(cmd=["sleep", "infinity"], image="ubuntu:20.04")

        assert json.loads(body.to_json()) == {"Cmd": ["sleep", "infinity"], "Image": "ubuntu:20.04"}

    def test_exec_body_defaults(self):
        body = GenerateExecInstanceBody(cmd=["uptime"])

        assert json.loads(body.to_json()) == {
            "AttachStdin": False,
            "AttachStdout": True,
            "AttachStderr": True,
            "Tty": True,
            "Cmd": ["uptime"],
        }

    def test_exec_body_requires_a_command(self):
        with pytest.raises(ValidationError):
            GenerateExecInstanceBody(cmd=[])

    def test_start_exec_defaults(self):
        assert json.loads(StartExecInstanceBody().to_json()) == {"Detach": False, "Tty": True}


class TestResponseBodies:
    def test_null_warnings_become_empty_list(self):
        body = CreateContainerResponseBody.model_validate_json('{"Id": "abc", "Warnings": null}')

        assert body.id == "abc"
        assert body.warnings == []

    def test_warnings_are_kept(self):
        body = CreateContainerResponseBody.model_validate(
            {"Id": "abc", "Warnings": ["memory limit ignored"]}
        )

        assert body.warnings == ["memory limit ignored"]

    def test_container_status_ignores_unknown_keys(self):
        raw = {
            "Id": "abc",
            "Name": "/ubuntu2004",
            "State": {"Status": "running", "Running": True, "Pid": 4242},
        }

        status = CheckContainerStatusBody.model_validate(raw)

        assert status.is_running is True
        assert status.state.running is True

    def test_running_flag_alone_is_not_enough(self):
        status = CheckContainerStatusBody.model_validate(
            {"State": {"Status": "restarting", "Running": True}}
        )

        assert status.is_running is False
