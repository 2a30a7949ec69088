"""Project scaffolding steps.

``ProjectGenerator`` runs them in order for a ``RunRequest``::

    from create_react_daisy.scaffolder import ProjectGenerator

    generator = ProjectGenerator(config)
    project_path = await generator.generate(request)
"""

from create_react_daisy.scaffolder.config_writer import write_configs
from create_react_daisy.scaffolder.generator import ProjectGenerator
from create_react_daisy.scaffolder.initializer import ProjectInitializer
from create_react_daisy.scaffolder.templates import TEMPLATE_CATALOG, render_template, write_app

__all__ = [
    "ProjectGenerator",
    "ProjectInitializer",
    "TEMPLATE_CATALOG",
    "render_template",
    "write_app",
    "write_configs",
]
