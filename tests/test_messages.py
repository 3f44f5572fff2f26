import pytest

from boshci import messages
from boshci.types import DeployOutcome, DeployStatus


def test_command_failed_error():
    e = messages.CommandFailedError(2, "bosh -n deploy", "Error 100")
    assert str(e) == "Command failed. rc = 2 Command: 'bosh -n deploy'"
    assert e.output == "Error 100"
    assert isinstance(e, messages.UserMessage)


def test_system_command_not_found():
    assert str(messages.SystemCommandNotFoundError("bosh")) == "Command 'bosh' not found"


def test_destructive_action_names_flag():
    e = messages.DestructiveActionNotConfirmedError()
    assert "DESTROY_DEPLOYMENTS=true" in str(e)


def test_configuration_error():
    assert str(messages.ConfigurationError("bad")) == "Invalid configuration: bad"
    assert str(messages.ConfigurationError("bad", ".ci.yml")) == (
        "Invalid configuration .ci.yml: bad"
    )


def test_messages_compare_by_text():
    assert messages.UnknownWorkflowError("x") == messages.UnknownWorkflowError("x")
    assert hash(messages.UnknownWorkflowError("x")) == hash("Unknown workflow 'x'")


def test_deploy_task_failed_is_exit():
    outcome = DeployOutcome(101, DeployStatus.FAILED)

    with pytest.raises(SystemExit) as e:
        raise messages.DeployTaskFailedError("foo", outcome)

    assert e.value.code == 1
    assert str(e.value) == "Deployment 'foo' failed in task 101"
    assert str(
        messages.DeployTaskFailedError("foo", DeployOutcome(None, DeployStatus.FAILED))
    ) == "Deployment 'foo' failed"
