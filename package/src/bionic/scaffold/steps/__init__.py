"""
Bionic Setup Steps

Per-project step handlers for `bionic start`. A handler returns False when
the user cancels, which stops the run.
"""

from bionic.scaffold.steps.stylesheet import stylesheet_step
from bionic.scaffold.steps.markup import markup_step
from bionic.scaffold.steps.build_hooks import build_hooks_step
from bionic.scaffold.steps.templates import templates_step
from bionic.scaffold.topology import ProjectRole

_APP_ROLES = (ProjectRole.STANDALONE, ProjectRole.HOSTED_CLIENT)

# Step definitions for the setup orchestrator, in execution order
SETUP_STEPS = [
    {
        "name": "stylesheet",
        "title": "Stylesheet",
        "description": "Create App.scss",
        "handler": stylesheet_step,
        "roles": _APP_ROLES,
    },
    {
        "name": "markup",
        "title": "Markup",
        "description": "Link App.css from wwwroot/index.html",
        "handler": markup_step,
        "roles": _APP_ROLES,
    },
    {
        "name": "build_hooks",
        "title": "Build Hooks",
        "description": "Add watch and SCSS compile hooks to the project file",
        "handler": build_hooks_step,
        "roles": _APP_ROLES + (ProjectRole.HOSTED_SERVER,),
    },
    {
        "name": "templates",
        "title": "Templates",
        "description": "Install the Bionic artifact templates",
        "handler": templates_step,
        "roles": _APP_ROLES,
    },
]

__all__ = [
    "stylesheet_step",
    "markup_step",
    "build_hooks_step",
    "templates_step",
    "SETUP_STEPS",
]
