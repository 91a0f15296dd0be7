"""
app/routes.py

One screen module per view. Kept free of Streamlit so the table can be
checked without starting the app.
"""

from __future__ import annotations

from pipelines.navigation import View

PAGE_MODULES: dict[View, str] = {
    View.WELCOME: "welcome",
    View.SIGN_UP: "sign_up",
    View.LOGIN: "login",
    View.RESIDENT_HOME: "resident_home",
    View.PROMPTS_LIST: "prompts_list",
    View.RECORDING: "recording",
    View.STAFF_HOME: "staff_home",
    View.STAFF_RECORDING_DETAIL: "recording_detail",
    View.STAFF_MANAGE_PROMPTS: "manage_prompts",
    View.CONTACT_FAMILY: "contact_family",
    View.SEND_GREETING: "send_greeting",
}


def import_render(view: View):
    """Import ``render`` from the page module for *view*."""
    module_name = PAGE_MODULES[view]
    mod = __import__(f"app.pages.{module_name}", fromlist=["render"])
    return mod.render
