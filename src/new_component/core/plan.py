"""File layout of a scaffolded component."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from new_component.core.config import Configuration

TEMPLATES_DIR = PurePosixPath("templates")
TEST_DIR_NAME = "__test__"


@dataclass(frozen=True, kw_only=True)
class ScaffoldPlan:
    """
    Every path touched while scaffolding one component.

    Output paths are relative to the working directory. Template paths are
    relative to the bundled templates package and never overlap with them.
    """

    component_name: str
    component_dir: PurePosixPath
    test_dir: PurePosixPath
    component_file_path: PurePosixPath
    index_file_path: PurePosixPath
    helpers_file_path: PurePosixPath
    test_file_path: PurePosixPath
    template_path: PurePosixPath
    test_template_path: PurePosixPath

    @property
    def output_paths(self) -> tuple[PurePosixPath, ...]:
        """Directories and files in the order the runner creates them."""
        return (
            self.component_dir,
            self.component_file_path,
            self.helpers_file_path,
            self.index_file_path,
            self.test_dir,
            self.test_file_path,
        )


def plan_scaffold(component_name: str, config: Configuration) -> ScaffoldPlan:
    """Map a component name and configuration to its :class:`ScaffoldPlan`."""
    name = component_name
    ext = config.extension
    component_dir = PurePosixPath(config.dir) / name
    test_dir = component_dir / TEST_DIR_NAME

    return ScaffoldPlan(
        component_name=name,
        component_dir=component_dir,
        test_dir=test_dir,
        component_file_path=component_dir / f"{name}.{ext}x",
        index_file_path=component_dir / f"index.{ext}",
        helpers_file_path=component_dir / f"{name}.helpers.{ext}",
        test_file_path=test_dir / f"{name}.test.{ext}",
        template_path=TEMPLATES_DIR / f"{config.type.value}.js",
        test_template_path=TEMPLATES_DIR / "test.js",
    )
