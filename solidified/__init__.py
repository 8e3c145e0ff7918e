"""create-solidified -- scaffolds SolidJS projects from a feature selection.

A base template for the chosen framework is copied, feature generators
layer their files and config edits on top, and a composed homepage plus a
provider-wrapped entry file are written last.

Quick usage::

    from solidified import ProjectConfig, scaffold_project

    config = ProjectConfig(
        name="my-app",
        framework="solid-start",
        api="trpc",
        database="drizzle",
    )
    project_path = await scaffold_project(config)
"""

from solidified.compatibility import CompatibilityError, assert_compatibility, disabled_options
from solidified.config import Settings
from solidified.models import ProjectConfig
from solidified.scaffold import ScaffoldError, scaffold_project

__all__ = [
    "CompatibilityError",
    "ProjectConfig",
    "ScaffoldError",
    "Settings",
    "assert_compatibility",
    "disabled_options",
    "scaffold_project",
]
