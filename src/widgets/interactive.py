"""Interactive widgets: multi-step flows, approvals and navigation."""

from typing import Any

from renderer.context import WidgetContext
from renderer.elements import Element, action_button, el
from renderer.models import ComponentCategory, ComponentMetadata, UIAction
from .base import component, disabled_attr


def render_wizard(props: dict[str, Any], ctx: WidgetContext) -> Element:
    steps = props.get("steps") or []
    if not steps:
        raise ValueError("Wizard requires at least one step")

    last = len(steps) - 1
    current = min(max(int(ctx.state.get("step", props.get("currentStep", 0))), 0), last)
    step = steps[current]
    step_id = str(step.get("id", current))

    def goto(index: int) -> None:
        ctx.state["step"] = max(0, min(index, last))

    indicator = None
    if props.get("showProgress", True):
        indicator = el(
            "ol",
            *[
                el(
                    "li",
                    text=s.get("title", f"Step {i + 1}"),
                    aria_current="step" if i == current else None,
                    data_complete=True if i < current else None,
                )
                for i, s in enumerate(steps)
            ],
            class_name="aiui-wizard-steps",
        )

    nav = [
        el("button", text="Back", on_click=lambda: goto(current - 1),
           disabled=True if current == 0 else None),
    ]
    if step.get("optional") and current < last:
        nav.append(el("button", text="Skip", on_click=lambda: goto(current + 1)))
    if current < last:
        nav.append(el("button", text="Next", on_click=lambda: goto(current + 1), class_name="aiui-action--primary"))
    else:
        finish = str(props.get("completeAction") or "complete")
        nav.append(
            action_button(finish, "Finish", lambda: ctx.emit(finish), primary=True, disabled=ctx.disabled)
        )

    return el(
        "div",
        indicator,
        el("h3", text=step.get("title", "")),
        el("p", text=step["description"]) if step.get("description") else None,
        ctx.render_nested(step.get("content"), f"step:{step_id}"),
        *ctx.children,
        el("div", *nav, class_name="aiui-wizard-nav"),
        class_name="aiui-wizard",
        data_step=current,
    )


def _checklist_states(items: list[dict[str, Any]], state: dict[str, Any]) -> dict[str, bool]:
    """Completion per item and sub-item, seeded from ``completed`` on first render."""
    states = state.setdefault("completed", {})
    for item in items:
        states.setdefault(item["id"], bool(item.get("completed")))
        for sub in item["subItems"]:
            states.setdefault(sub["id"], bool(sub.get("completed")))
    return states


def _normalize_items(raw: Any) -> list[dict[str, Any]]:
    items = []
    for index, item in enumerate(raw or []):
        if isinstance(item, str):
            item = {"label": item}
        item_id = str(item.get("id") or f"item-{index}")
        subs = [
            {**sub, "id": f"{item_id}.{sub.get('id') or f'subitem-{sub_index}'}"}
            for sub_index, sub in enumerate(item.get("subItems") or [])
        ]
        items.append({**item, "id": item_id, "subItems": subs})
    return items


def render_checklist(props: dict[str, Any], ctx: WidgetContext) -> Element:
    items = _normalize_items(props.get("items"))
    states = _checklist_states(items, ctx.state)
    expanded = ctx.state.setdefault("expanded", [])
    allow_check = props.get("allowCheck", True)
    all_required = bool(props.get("allRequired"))

    def toggle_expand(item_id: str) -> None:
        if item_id in expanded:
            expanded.remove(item_id)
        else:
            expanded.append(item_id)

    def checkbox(key: str, label: str, required: bool = False) -> Element:
        box = el(
            "input",
            type="checkbox",
            name=key,
            checked=states[key],
            required=True if required else None,
            aria_label=f"Toggle {label}",
            disabled=disabled_attr(props, not allow_check),
        )

        def toggle() -> None:
            states[key] = not states[key]
            box.set_checked(states[key])

        if allow_check:
            box.handler = toggle
        return box

    rows = []
    for item in items:
        required = all_required or bool(item.get("required"))
        label = item.get("label", item["id"])
        subs = item["subItems"]
        is_open = item["id"] in expanded
        sub_list = None
        if subs and is_open:
            sub_list = el(
                "ul",
                *[
                    el("li", checkbox(sub["id"], sub.get("label", sub["id"])),
                       el("label", text=sub.get("label", sub["id"]), for_=sub["id"]))
                    for sub in subs
                ],
            )
        rows.append(
            el(
                "li",
                el("button", text="Collapse" if is_open else "Expand",
                   on_click=lambda item_id=item["id"]: toggle_expand(item_id),
                   aria_expanded=is_open) if subs else None,
                checkbox(item["id"], label, required),
                el("label", text=label, for_=item["id"]),
                el("small", text="Required") if required else None,
                el("small", text=item["description"]) if item.get("description") else None,
                sub_list,
                data_completed=states[item["id"]],
            )
        )

    progress = None
    if props.get("showProgress", True):
        done = sum(1 for item in items if states[item["id"]])
        required_ids = [item["id"] for item in items if all_required or item.get("required")]
        required_done = sum(1 for item_id in required_ids if states[item_id])
        progress = el(
            "div",
            el("p", text=f"{done} of {len(items)} complete"),
            el("p", text=f"Required items: {required_done}/{len(required_ids)}") if required_ids else None,
            class_name="aiui-checklist-progress",
        )

    return el(
        "div",
        el("h4", text=props["title"]) if props.get("title") else None,
        progress,
        el("ul", *rows),
        class_name="aiui-checklist",
    )


def _approval_actions(props: dict[str, Any]) -> list[UIAction]:
    if props.get("actions"):
        return [UIAction.model_validate(action) for action in props["actions"]]
    return [
        UIAction(id=str(props.get("approveAction") or "approve"),
                 label=props.get("approveLabel") or "Approve", primary=True),
        UIAction(id=str(props.get("rejectAction") or "reject"),
                 label=props.get("rejectLabel") or "Reject", destructive=True),
    ]


def render_approval_buttons(props: dict[str, Any], ctx: WidgetContext) -> Element:
    alignment = props.get("alignment") or "center"
    buttons = [
        action_button(
            action.id,
            action.label,
            lambda action_id=action.id: ctx.emit(action_id),
            primary=action.primary,
            destructive=action.destructive,
            alignment=action.alignment or alignment,
            disabled=ctx.disabled,
        )
        for action in _approval_actions(props)
    ]
    return el(
        "div",
        el("p", text=props["message"]) if props.get("message") else None,
        *buttons,
        role="group",
        class_name="aiui-approval",
        data_alignment=alignment,
        data_spacing=props.get("spacing") or "normal",
        data_full_width=True if props.get("fullWidth") else None,
    )


def render_progress_bar(props: dict[str, Any], ctx: WidgetContext) -> Element:
    maximum = float(props.get("max", 100)) or 100.0
    value = min(max(float(props.get("value", 0)), 0.0), maximum)
    percent = round(value / maximum * 100)
    return el(
        "div",
        el("span", text=props["label"]) if props.get("label") else None,
        el("span", text=f"{percent}%") if props.get("showPercentage", True) else None,
        role="progressbar",
        aria_valuenow=value,
        aria_valuemin=0,
        aria_valuemax=maximum,
        data_variant=props.get("variant") or "default",
        class_name="aiui-progress",
    )


def render_tabs(props: dict[str, Any], ctx: WidgetContext) -> Element:
    tabs = props.get("tabs") or []
    if not tabs:
        return el("div", class_name="aiui-tabs")

    ids = [str(tab.get("id", index)) for index, tab in enumerate(tabs)]
    active = ctx.state.get("active", str(props.get("defaultTab") or ids[0]))
    if active not in ids:
        active = ids[0]

    def select(tab_id: str) -> None:
        ctx.state["active"] = tab_id

    tab_list = el(
        "div",
        *[
            el(
                "button",
                text=tab.get("label", tab_id),
                on_click=lambda tab_id=tab_id: select(tab_id),
                role="tab",
                aria_selected=tab_id == active,
                data_tab=tab_id,
                disabled=True if tab.get("disabled") else None,
            )
            for tab, tab_id in zip(tabs, ids)
        ],
        role="tablist",
    )
    content = tabs[ids.index(active)].get("content")
    return el(
        "div",
        tab_list,
        el("div", ctx.render_nested(content, f"tab:{active}"), role="tabpanel", data_tab=active),
        class_name="aiui-tabs",
        data_variant=props.get("variant") or "default",
    )


def render_link(props: dict[str, Any], ctx: WidgetContext) -> Element:
    text = props.get("text") or props.get("href") or ""
    action_id = props.get("actionId")
    on_click = (lambda: ctx.emit(str(action_id))) if action_id else None
    external = bool(props.get("external"))
    return el(
        "a",
        text=text,
        on_click=on_click,
        href=props.get("href"),
        target="_blank" if external else None,
        rel="noopener noreferrer" if external else None,
        data_action=action_id,
        disabled=True if ctx.disabled and action_id else None,
    )


def interactive_components() -> list[ComponentMetadata]:
    category = ComponentCategory.INTERACTIVE
    return [
        component("Wizard", category, "Multi-step wizard component", render_wizard),
        component("Checklist", category, "Task checklist with progress", render_checklist),
        component("ApprovalButtons", category, "Approval, rejection or custom action buttons", render_approval_buttons),
        component("ProgressBar", category, "Progress indicator", render_progress_bar),
        component("Tabs", category, "Tabbed content container", render_tabs),
        component("Link", category, "Hyperlink or in-app action link", render_link),
    ]
