"""Application entry-point templates.

Each UI template is a fixed React component body using DaisyUI classes. The
catalog maps every :class:`TemplateKey` to a function returning that body;
nothing is substituted into it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType

from create_react_daisy.errors import UnknownTemplateError
from create_react_daisy.models import Language, TemplateKey
from create_react_daisy.utils import write_text

TemplateFn = Callable[[bool], str]


# ---------------------------------------------------------------------------
# Template bodies
# ---------------------------------------------------------------------------


def _hero(title: str, text: str, button: str) -> str:
    return f"""function App() {{
  return (
    <div className="min-h-screen bg-base-200">
      <div className="hero min-h-screen">
        <div className="hero-content text-center">
          <div className="max-w-md">
            <h1 className="text-5xl font-bold">{title}</h1>
            <p className="py-6">{text}</p>
            <button className="btn btn-primary">{button}</button>
          </div>
        </div>
      </div>
    </div>
  )
}}

export default App
"""


def basic_template(is_ts: bool = False) -> str:
    return _hero(
        "Hello World",
        "This is a React + Vite project with Tailwind CSS and DaisyUI preconfigured.",
        "Get Started",
    )


def dashboard_template(is_ts: bool = False) -> str:
    """Drawer layout: navbar toggle, three stat cards, three-item sidebar menu."""
    return """function App() {
  return (
    <div className="drawer lg:drawer-open">
      <input id="app-drawer" type="checkbox" className="drawer-toggle" />
      <div className="drawer-content flex flex-col">
        <div className="navbar bg-base-100 shadow">
          <div className="flex-none lg:hidden">
            <label htmlFor="app-drawer" className="btn btn-square btn-ghost">
              <svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" className="inline-block w-6 h-6 stroke-current">
                <path strokeLinecap="round" strokeLinejoin="round" strokeWidth="2" d="M4 6h16M4 12h16M4 18h16"></path>
              </svg>
            </label>
          </div>
          <div className="flex-1 px-2 text-xl font-bold">Dashboard</div>
        </div>
        <main className="p-6 bg-base-200 min-h-screen">
          <div className="grid grid-cols-1 gap-6 md:grid-cols-3">
            <div className="card bg-base-100 shadow-xl">
              <div className="card-body">
                <h2 className="card-title">Users</h2>
                <p>1,024 active users this week.</p>
              </div>
            </div>
            <div className="card bg-base-100 shadow-xl">
              <div className="card-body">
                <h2 className="card-title">Revenue</h2>
                <p>$12,400 earned this month.</p>
              </div>
            </div>
            <div className="card bg-base-100 shadow-xl">
              <div className="card-body">
                <h2 className="card-title">Orders</h2>
                <p>86 orders waiting to ship.</p>
              </div>
            </div>
          </div>
        </main>
      </div>
      <div className="drawer-side">
        <label htmlFor="app-drawer" aria-label="close sidebar" className="drawer-overlay"></label>
        <ul className="menu p-4 w-64 min-h-full bg-base-100">
          <li><a>Overview</a></li>
          <li><a>Reports</a></li>
          <li><a>Settings</a></li>
        </ul>
      </div>
    </div>
  )
}

export default App
"""


def landing_template(is_ts: bool = False) -> str:
    return _hero(
        "Landing Page",
        "Tell visitors what your product does and why they will love it.",
        "Sign Up",
    )


def ecommerce_template(is_ts: bool = False) -> str:
    return _hero(
        "E-commerce",
        "Browse the catalog and find something you like.",
        "Shop Now",
    )


def blog_template(is_ts: bool = False) -> str:
    return _hero(
        "Blog",
        "Thoughts, stories and ideas.",
        "Read Posts",
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

TEMPLATE_CATALOG: Mapping[TemplateKey, TemplateFn] = MappingProxyType(
    {
        TemplateKey.BASIC: basic_template,
        TemplateKey.DASHBOARD: dashboard_template,
        TemplateKey.LANDING: landing_template,
        TemplateKey.ECOMMERCE: ecommerce_template,
        TemplateKey.BLOG: blog_template,
    }
)

if set(TEMPLATE_CATALOG) != set(TemplateKey):
    raise RuntimeError("TEMPLATE_CATALOG must cover every TemplateKey")


def render_template(key: TemplateKey | str, is_ts: bool = False) -> str:
    """Return the component body for *key*.

    *is_ts* is accepted for every template but the bodies are valid as both
    JSX and TSX, so the output is the same for either language.

    Raises:
        UnknownTemplateError: If *key* is not a ``TemplateKey`` value.
    """
    try:
        template_key = TemplateKey(key)
    except ValueError:
        raise UnknownTemplateError(str(key)) from None
    return TEMPLATE_CATALOG[template_key](is_ts)


def app_path(project_path: str | Path, language: Language) -> Path:
    """Path of ``src/App.<jsx|tsx>`` inside the project."""
    return Path(project_path) / "src" / f"App.{language.app_extension}"


def write_app(project_path: str | Path, key: TemplateKey | str, language: Language) -> Path:
    """Render *key* and overwrite the project's application entry point."""
    content = render_template(key, language.is_typescript)
    return write_text(app_path(project_path, language), content)
