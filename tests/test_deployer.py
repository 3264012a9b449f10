"""Tests for template deployment."""

import shutil
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from rpkgdev import deploy_template
from rpkgdev.api.deployer import TemplateDeployer
from rpkgdev.api.exceptions import (
    DestinationExistsError,
    InvalidNameError,
    PrerequisiteMissingError,
    TemplateNotFoundError,
)
from rpkgdev.core.config import DeployerConfig
from rpkgdev.core.descriptor import parse_description
from rpkgdev.core.ide import NullIdeBridge
from rpkgdev.core.vcs import NullVcsClient, VcsClient
from rpkgdev.models import DeploymentRequest

from .conftest import snapshot


class FailingVcsClient(VcsClient):
    name = "git"

    def is_available(self):
        return True

    def init(self, path, quiet=False):
        raise subprocess.CalledProcessError(128, ["git", "init"])


class TestDeployStructure:
    """Test the created package layout."""

    def test_default_deployment(self, tmp_path, deployer, vcs):
        target = tmp_path / "x" / "demo"
        result = deployer.deploy(DeploymentRequest(path=target, quiet=True))

        assert result.path == target
        assert result.package_name == "demo"
        assert target.is_dir()

        for directory in ["R", "man", "tests/testthat", "vignettes/articles", "data", "inst"]:
            assert (target / directory).is_dir()
            assert result.has(f"{directory}/")

        assert (target / "DESCRIPTION").is_file()
        assert result.has("DESCRIPTION")
        assert result.has("NAMESPACE")
        assert result.has("LICENSE")

        # Optional subtrees default to included
        assert (target / ".claude" / "settings.local.json").is_file()
        assert (target / ".claude" / "agents" / "r-package-developer.md").is_file()
        assert (target / "dev" / "daily_test.R").is_file()
        assert result.has(".claude/agents/test-writer.md")
        assert result.has("dev/check_local.R")

        # Unconditional subtrees
        assert (target / ".github" / "workflows" / "R-CMD-check.yaml").is_file()
        assert (target / "tests" / "testthat.R").is_file()
        assert (target / ".gitignore").is_file()
        assert (target / ".Rbuildignore").is_file()
        assert (target / "_pkgdown.yml").is_file()

        assert result.ide_project == target / "demo.Rproj"
        assert result.has("demo.Rproj")
        assert result.git_initialized is True
        assert vcs.calls == [target]
        assert result.warnings == ()

    def test_descriptor_contains_name(self, tmp_path, deployer):
        target = tmp_path / "demo"
        deployer.deploy(DeploymentRequest(path=target, package_name="my.pkg", quiet=True))

        fields = parse_description(target)
        assert fields["Package"] == "my.pkg"
        assert fields["Version"] == "0.0.0.9000"
        assert fields["License"] == "MIT + file LICENSE"
        assert 'person("First", "Last"' in fields["Authors@R"]
        assert (target / "my.pkg.Rproj").is_file()

    @pytest.mark.parametrize("name", ["a", "pkg2", "my.pkg", "Zeta9"])
    def test_valid_names_deploy(self, tmp_path, deployer, name):
        target = tmp_path / "pkg"
        deployer.deploy(DeploymentRequest(path=target, package_name=name, quiet=True))
        assert parse_description(target)["Package"] == name

    def test_placeholders_rendered(self, tmp_path, deployer):
        target = tmp_path / "demo"
        deployer.deploy(DeploymentRequest(path=target, quiet=True))

        runner = (target / "tests" / "testthat.R").read_text()
        assert "library(demo)" in runner
        assert 'test_check("demo")' in runner
        assert "{{" not in runner

        # GitHub expressions are not placeholders
        workflow = (target / ".github" / "workflows" / "R-CMD-check.yaml").read_text()
        assert "${{ matrix.config.os }}" in workflow

    def test_rproj_boilerplate(self, tmp_path, deployer):
        target = tmp_path / "demo"
        deployer.deploy(DeploymentRequest(path=target, quiet=True))
        content = (target / "demo.Rproj").read_text()
        assert content.startswith("Version: 1.0")
        assert "BuildType: Package" in content

    def test_custom_descriptor_config(self, tmp_path, vcs, ide):
        config = DeployerConfig(
            author_given="Ada",
            author_family="Lovelace",
            author_email="ada@example.com",
            license="GPL-3",
        )
        deployer = TemplateDeployer(vcs=vcs, ide=ide, config=config, console=Console(quiet=True))
        result = deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))

        fields = parse_description(result.path)
        assert 'person("Ada", "Lovelace", email = "ada@example.com"' in fields["Authors@R"]
        assert fields["License"] == "GPL-3"
        assert not (result.path / "LICENSE").exists()
        assert not result.has("LICENSE")


class TestDeployFlags:
    """Test optional deployment steps."""

    def test_without_agent_config(self, tmp_path, deployer):
        target = tmp_path / "demo"
        result = deployer.deploy(
            DeploymentRequest(path=target, agent_config=False, quiet=True)
        )
        assert not (target / ".claude").exists()
        assert not any(path.startswith(".claude") for path in result.files_created)

    def test_without_dev_scripts(self, tmp_path, deployer):
        target = tmp_path / "demo"
        result = deployer.deploy(
            DeploymentRequest(path=target, dev_scripts=False, quiet=True)
        )
        assert not (target / "dev").exists()
        assert not any(path.startswith("dev/") for path in result.files_created)

    def test_without_ide_project(self, tmp_path, deployer):
        target = tmp_path / "demo"
        result = deployer.deploy(
            DeploymentRequest(path=target, ide_project=False, quiet=True)
        )
        assert result.ide_project is None
        assert not (target / "demo.Rproj").exists()

    def test_without_git(self, tmp_path, deployer, vcs):
        result = deployer.deploy(
            DeploymentRequest(path=tmp_path / "demo", git_init=False, quiet=True)
        )
        assert result.git_initialized is False
        assert vcs.calls == []

    def test_missing_vcs_is_a_warning(self, tmp_path, ide):
        deployer = TemplateDeployer(
            vcs=NullVcsClient(available=False), ide=ide, console=Console(quiet=True)
        )
        result = deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))

        assert result.git_initialized is False
        assert len(result.warnings) == 1
        assert "skipping repository initialization" in result.warnings[0]
        assert (result.path / "DESCRIPTION").exists()

    def test_failed_vcs_init_is_a_warning(self, tmp_path, ide):
        deployer = TemplateDeployer(
            vcs=FailingVcsClient(), ide=ide, console=Console(quiet=True)
        )
        result = deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))
        assert result.git_initialized is False
        assert "Failed to initialize git repository" in result.warnings[0]

    def test_open_project_in_interactive_session(self, tmp_path, deployer, ide):
        result = deployer.deploy(DeploymentRequest(
            path=tmp_path / "demo",
            open_project=True,
            interactive=True,
            ide_available=True,
            quiet=True,
        ))
        assert ide.opened == [result.ide_project]

    @pytest.mark.parametrize(
        "interactive,ide_available",
        [(False, True), (True, False), (False, False)],
    )
    def test_open_project_skipped(self, tmp_path, deployer, ide, interactive, ide_available):
        deployer.deploy(DeploymentRequest(
            path=tmp_path / "demo",
            open_project=True,
            interactive=interactive,
            ide_available=ide_available,
            quiet=True,
        ))
        assert ide.opened == []

    def test_open_project_needs_ide_project_file(self, tmp_path, deployer, ide):
        deployer.deploy(DeploymentRequest(
            path=tmp_path / "demo",
            ide_project=False,
            open_project=True,
            interactive=True,
            ide_available=True,
            quiet=True,
        ))
        assert ide.opened == []

    def test_unreachable_ide_is_a_warning(self, tmp_path, vcs):
        deployer = TemplateDeployer(
            vcs=vcs, ide=NullIdeBridge(available=False), console=Console(quiet=True)
        )
        result = deployer.deploy(DeploymentRequest(
            path=tmp_path / "demo",
            open_project=True,
            interactive=True,
            ide_available=True,
            quiet=True,
        ))
        assert any("opening the project" in warning for warning in result.warnings)


class TestDeployFailures:
    """Test fatal deployment errors."""

    @pytest.mark.parametrize("name", ["", "123bad", "my-package", "my package", "demo\n"])
    def test_invalid_name_creates_nothing(self, tmp_path, deployer, name):
        target = tmp_path / "x" / "pkg"
        with pytest.raises(InvalidNameError) as excinfo:
            deployer.deploy(DeploymentRequest(path=target, package_name=name, quiet=True))
        assert f"'{name}'" in str(excinfo.value)
        assert not (tmp_path / "x").exists()

    def test_invalid_inferred_name(self, tmp_path, deployer):
        with pytest.raises(InvalidNameError, match="123bad"):
            deployer.deploy(DeploymentRequest(path=tmp_path / "123bad", quiet=True))
        assert not (tmp_path / "123bad").exists()

    def test_second_deploy_leaves_first_untouched(self, tmp_path, deployer):
        target = tmp_path / "demo"
        deployer.deploy(DeploymentRequest(path=target, quiet=True))
        (target / "R" / "hello.R").write_text("hello <- function() 'hi'\n")
        before = snapshot(target)

        with pytest.raises(DestinationExistsError):
            deployer.deploy(DeploymentRequest(path=target, quiet=True))

        assert snapshot(target) == before

    def test_overwrite_replaces_template_files(self, tmp_path, deployer):
        target = tmp_path / "demo"
        deployer.deploy(DeploymentRequest(path=target, quiet=True))
        (target / "DESCRIPTION").write_text("Package: broken\n")
        (target / "R" / "keep.R").write_text("keep <- 1\n")

        deployer.deploy(DeploymentRequest(path=target, overwrite=True, quiet=True))

        assert parse_description(target)["Package"] == "demo"
        assert (target / "R" / "keep.R").read_text() == "keep <- 1\n"

    def test_missing_template_root(self, tmp_path, vcs, ide):
        deployer = TemplateDeployer(
            template_root=tmp_path / "nowhere", vcs=vcs, ide=ide, console=Console(quiet=True)
        )
        target = tmp_path / "demo"
        with pytest.raises(TemplateNotFoundError, match="reinstall"):
            deployer.deploy(DeploymentRequest(path=target, quiet=True))
        assert not target.exists()

    def test_missing_enabled_subtree(self, tmp_path, template_copy, vcs, ide):
        shutil.rmtree(template_copy / "dev")
        deployer = TemplateDeployer(
            template_root=template_copy, vcs=vcs, ide=ide, console=Console(quiet=True)
        )

        with pytest.raises(TemplateNotFoundError):
            deployer.deploy(DeploymentRequest(path=tmp_path / "one", quiet=True))
        assert not (tmp_path / "one").exists()

        # Disabled subtrees are never looked at
        result = deployer.deploy(
            DeploymentRequest(path=tmp_path / "two", dev_scripts=False, quiet=True)
        )
        assert result.has("DESCRIPTION")

    def test_missing_descriptor_template(self, tmp_path, template_copy, vcs, ide):
        (template_copy / "project" / "DESCRIPTION").unlink()
        deployer = TemplateDeployer(
            template_root=template_copy, vcs=vcs, ide=ide, console=Console(quiet=True)
        )
        with pytest.raises(TemplateNotFoundError):
            deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))
        assert not (tmp_path / "demo").exists()


class TestDeployDeterminism:
    """Test repeated deployments."""

    def test_same_inputs_same_paths(self, tmp_path, deployer):
        first = deployer.deploy(
            DeploymentRequest(path=tmp_path / "a" / "demo", quiet=True)
        )
        second = deployer.deploy(
            DeploymentRequest(path=tmp_path / "b" / "demo", quiet=True)
        )
        assert first.files_created == second.files_created

    def test_files_created_exist(self, tmp_path, deployer):
        result = deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))
        for relative in result.files_created:
            assert (result.path / relative).exists(), relative

    def test_binary_files_copied_verbatim(self, tmp_path, template_copy, vcs, ide):
        payload = b"\x89PNG\r\n\x1a\n\x00\x00{{ package_name }}"
        (template_copy / "core" / "logo.png").write_bytes(payload)
        deployer = TemplateDeployer(
            template_root=template_copy, vcs=vcs, ide=ide, console=Console(quiet=True)
        )
        result = deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))
        assert (result.path / "logo.png").read_bytes() == payload


class TestDeployTemplateFunction:
    """Test the convenience function."""

    def test_deploy_template(self, tmp_path):
        vcs = NullVcsClient()
        result = deploy_template(
            tmp_path / "testpkg",
            vcs=vcs,
            ide_project=False,
            quiet=True,
        )
        assert result.package_name == "testpkg"
        assert result.git_initialized is True
        assert result.to_dict()["files_created"] == list(result.files_created)

    def test_status_output(self, tmp_path, vcs, ide):
        console = Console(record=True, width=120)
        deployer = TemplateDeployer(vcs=vcs, ide=ide, console=console)
        deployer.deploy(DeploymentRequest(path=tmp_path / "demo"))

        output = console.export_text()
        assert "Package name: demo" in output
        assert "Deployment Complete" in output
        assert "Next steps:" in output

    def test_quiet_output(self, tmp_path, vcs, ide):
        console = Console(record=True, width=120)
        deployer = TemplateDeployer(vcs=vcs, ide=ide, console=console)
        deployer.deploy(DeploymentRequest(path=tmp_path / "demo", quiet=True))
        assert console.export_text() == ""

    def test_module_logger(self, deployer):
        assert deployer.logger.name == "rpkgdev.api.deployer"
