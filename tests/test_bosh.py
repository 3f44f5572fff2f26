from pathlib import Path

import pytest

from boshci import bosh


@pytest.mark.parametrize(
    "request_, expected",
    [
        (bosh.SetTarget("example.com:25555"), "bosh -n target example.com:25555"),
        (bosh.Login("foo", "bar"), "bosh -n login foo bar"),
        (bosh.SelectDeployment("foo"), "bosh -n deployment foo"),
        (
            bosh.CreatePatch(Path("foo/bar.yml")),
            "bosh -n create deployment patch foo/bar.yml",
        ),
        (
            bosh.ApplyPatch(Path("foo/bar.yml")),
            "bosh -n apply deployment patch foo/bar.yml",
        ),
        (bosh.PrepareDeployment(), "bosh -n prepare deployment"),
        (bosh.Deploy(), "bosh -n deploy"),
        (bosh.Deploy(skip_merge=True), "bosh -n deploy --skip-merge"),
        (bosh.RunErrand("smoke-tests"), "bosh -n run errand smoke-tests"),
        (bosh.ListDeployments(), "bosh -n deployments"),
        (bosh.DeleteDeployment("foo-z1"), "bosh -n delete deployment foo-z1 --force"),
        (bosh.DeleteDeployment("foo-z1", force=False), "bosh -n delete deployment foo-z1"),
    ],
)
def test_render(request_, expected):
    assert bosh.render(request_) == expected


def test_render_quotes_arguments():
    assert bosh.render(bosh.Login("foo", "p@ss word")) == "bosh -n login foo 'p@ss word'"


def test_render_custom_executable():
    assert (
        bosh.render(bosh.ListDeployments(), "/opt/bin/bosh")
        == "/opt/bin/bosh -n deployments"
    )
