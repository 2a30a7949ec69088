"""create-react-daisy -- React + Vite + Tailwind CSS + DaisyUI project scaffolder.

Quick usage::

    from create_react_daisy import ProjectGenerator, RunRequest, Language

    request = RunRequest(project_name="demo", language=Language.TYPESCRIPT)
    project_path = await ProjectGenerator().generate(request)
"""

__version__ = "0.1.0"

from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.models import Language, RunRequest, TemplateKey
from create_react_daisy.scaffolder import ProjectGenerator

__all__ = [
    "Language",
    "ProjectGenerator",
    "RunRequest",
    "ScaffoldConfig",
    "TemplateKey",
    "__version__",
]
