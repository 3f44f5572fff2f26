from argparse import Namespace
from pathlib import Path

import pytest

from boshci import config
from boshci.exceptions import MalformedTargetError
from boshci.messages import ConfigurationError
from boshci.types import DeploymentDescriptor

CI_YML = """
target: foo:bar@localhost:25555
skip_merge: true
deployments:
  - name: foo
    create_patch: patches/foo.yml
    errands: [smoke-tests, acceptance-tests]
  - name: bar
    apply_patch: patches/bar.yml
"""


def args(**kw):
    defaults = dict(
        target=None,
        skip_merge=False,
        deployments_dir=None,
        bosh=None,
        destroy_deployments=False,
    )
    defaults.update(kw)
    return Namespace(**defaults)


def test_read_config(write_config):
    cfg = write_config(CI_YML)

    assert cfg.target == "foo:bar@localhost:25555"
    assert cfg.skip_merge is True
    assert cfg.deployments == (
        DeploymentDescriptor(
            "foo",
            Path("patches/foo.yml"),
            None,
            ("smoke-tests", "acceptance-tests"),
        ),
        DeploymentDescriptor("bar", None, Path("patches/bar.yml"), ()),
    )


def test_defaults(write_config):
    cfg = write_config("")

    assert cfg.target is None
    assert cfg.deployments == ()
    assert cfg.skip_merge is False
    assert cfg.deployments_dir == Path("deployments")
    assert cfg.bosh_cli == "bosh"
    assert cfg.bosh_user is None
    assert cfg.bosh_password is None
    assert cfg.destroy_deployments is False


def test_missing_file_uses_defaults(tmp_path):
    cfg = config.Config(tmp_path / "nope.yml", environ={})
    assert cfg.deployments == ()


def test_config_path_from_environment(tmp_path):
    path = tmp_path / "ci.yml"
    path.write_text("target: example.com:25555\n")

    cfg = config.Config(environ={"BOSHCI_CONF": str(path)})

    assert cfg.configfile == path
    assert cfg.target == "example.com:25555"


def test_environment(write_config):
    cfg = write_config(
        CI_YML,
        environ={
            "BOSH_USER": "env_user",
            "BOSH_PASSWORD": "env_pw",
            "DESTROY_DEPLOYMENTS": "true",
        },
    )
    assert cfg.bosh_user == "env_user"
    assert cfg.bosh_password == "env_pw"
    assert cfg.destroy_deployments is True


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TRUE", True), ("1", True), ("yes", True), ("on", True),
     ("false", False), ("0", False), ("", False), ("nope", False)],
)
def test_destroy_deployments_flag(write_config, value, expected):
    cfg = write_config("", environ={"DESTROY_DEPLOYMENTS": value})
    assert cfg.destroy_deployments is expected


@pytest.mark.parametrize(
    "text, reason",
    [
        ("- just\n- a list\n", "top level"),
        ("deployments: foo\n", "must be a list"),
        ("deployments:\n  - errands: [x]\n", "has no name"),
        ("deployments:\n  - foo\n", "not a mapping"),
        ("deployments:\n  - name: foo\n    errands: smoke\n", "must be a list"),
        ("deployments:\n  - name: foo\n  - name: foo\n", "listed twice"),
        ("target: [unclosed\n", ""),
    ],
)
def test_invalid_config(write_config, text, reason):
    with pytest.raises(ConfigurationError, match=reason) as e:
        write_config(text)
    assert e.value.path is not None


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ('"true"', True), ("yes", True), ('"false"', False),
     ("false", False), ('"no"', False), ("", False)],
)
def test_skip_merge_values(write_config, value, expected):
    cfg = write_config(f"skip_merge: {value}\n")
    assert cfg.skip_merge is expected


def test_skip_merge_rejects_lists(write_config):
    with pytest.raises(ConfigurationError, match="expected a boolean") as e:
        write_config("skip_merge: [true]\n")
    assert e.value.path is not None


def test_target_spec_uses_environment(write_config):
    cfg = write_config(
        "target: example.com:25555\n",
        environ={"BOSH_USER": "env_user", "BOSH_PASSWORD": "env_pw"},
    )
    spec = cfg.target_spec()
    assert (spec.username, spec.password) == ("env_user", "env_pw")


def test_target_spec_missing(write_config):
    with pytest.raises(ConfigurationError, match="no target"):
        write_config("").target_spec()


def test_target_spec_malformed(write_config):
    with pytest.raises(MalformedTargetError):
        write_config("target: localhost\n").target_spec()


def test_merge_args(write_config, tmp_path):
    cfg = write_config("target: example.com:25555\n")
    cfg.merge_args(
        args(
            target="admin@10.0.0.6:25555",
            skip_merge=True,
            deployments_dir=tmp_path,
            bosh="/usr/local/bin/bosh",
            destroy_deployments=True,
        )
    )
    assert cfg.target == "admin@10.0.0.6:25555"
    assert cfg.skip_merge is True
    assert cfg.deployments_dir == tmp_path
    assert cfg.bosh_cli == "/usr/local/bin/bosh"
    assert cfg.destroy_deployments is True


def test_merge_args_applies_fixups(write_config):
    cfg = write_config("")
    cfg.merge_args(args(deployments_dir="other/deployments"))
    assert cfg.deployments_dir == Path("other/deployments")
    assert isinstance(cfg.deployments_dir, Path)


def test_merge_args_keeps_config(write_config):
    cfg = write_config(CI_YML)
    cfg.merge_args(args())
    assert cfg.target == "foo:bar@localhost:25555"
    assert cfg.skip_merge is True
    assert cfg.destroy_deployments is False


def test_set_option(write_config):
    cfg = write_config("")
    cfg.set_option("deployments_dir", "other")
    assert cfg.deployments_dir == Path("other")

    with pytest.raises(config.InvalidOptionNameError):
        cfg.set_option("nope", 1)
