"""Input widgets: named fields picked up by the action dispatcher."""

from typing import Any

from renderer.context import WidgetContext
from renderer.elements import Element, action_button, el
from renderer.models import ComponentCategory, ComponentMetadata
from .base import component, disabled_attr, field_label, initial_value, normalize_options

TEXT_INPUT_TYPES = ("text", "email", "url", "password", "number", "tel", "search")


def _field(props: dict[str, Any], control: Element, kind: str) -> Element:
    return el(
        "div",
        field_label(props),
        control,
        el("small", text=props["helperText"]) if props.get("helperText") else None,
        el("small", text=props["error"], role="alert") if props.get("error") else None,
        class_name=f"aiui-field aiui-field--{kind}",
    )


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def render_multiple_choice(props: dict[str, Any], ctx: WidgetContext) -> Element:
    name = props.get("name") or "choice"
    options = normalize_options(props.get("options"))
    multiple = bool(props.get("multiple"))
    selected = _as_list(initial_value(props, None))
    kind = "checkbox" if multiple else "radio"

    choices = []
    for option in options:
        option_name = f"{name}.{option['value']}" if multiple else name
        choices.append(
            el(
                "label",
                el(
                    "input",
                    type=kind,
                    name=option_name,
                    value=option["value"],
                    checked=option["value"] in selected,
                    disabled=disabled_attr(props, option.get("disabled")),
                ),
                el("span", text=option["label"]),
                el("small", text=option["description"]) if option.get("description") else None,
            )
        )
    if props.get("allowCustom"):
        choices.append(
            el("input", type="text", name=f"{name}_custom", value="",
               placeholder=props.get("customPlaceholder") or "Other...",
               disabled=disabled_attr(props))
        )
    return el(
        "fieldset",
        el("legend", text=props.get("question") or props.get("label") or ""),
        *choices,
        class_name="aiui-multiple-choice",
    )


def render_text_input(props: dict[str, Any], ctx: WidgetContext) -> Element:
    kind = props.get("type") if props.get("type") in TEXT_INPUT_TYPES else "text"
    control = el(
        "input",
        type=kind,
        name=props.get("name"),
        value=str(initial_value(props)),
        placeholder=props.get("placeholder"),
        required=True if props.get("required") else None,
        maxlength=props.get("maxLength"),
        disabled=disabled_attr(props),
    )
    return _field(props, control, "text")


def render_text_area(props: dict[str, Any], ctx: WidgetContext) -> Element:
    control = el(
        "textarea",
        name=props.get("name"),
        value=str(initial_value(props)),
        placeholder=props.get("placeholder"),
        rows=props.get("rows", 4),
        required=True if props.get("required") else None,
        disabled=disabled_attr(props),
    )
    return _field(props, control, "textarea")


def render_checkbox(props: dict[str, Any], ctx: WidgetContext) -> Element:
    name = props.get("name")
    options = normalize_options(props.get("options"))
    if not options:
        return el(
            "label",
            el("input", type="checkbox", name=name,
               checked=bool(initial_value(props, props.get("checked", False))),
               disabled=disabled_attr(props)),
            el("span", text=props.get("label", "")),
            class_name="aiui-checkbox",
        )

    selected = _as_list(initial_value(props, props.get("checked")))
    boxes = [
        el(
            "label",
            el("input", type="checkbox",
               name=f"{name}.{option['value']}" if name else option["value"],
               value=option["value"],
               checked=option["value"] in selected,
               disabled=disabled_attr(props, option.get("disabled"))),
            el("span", text=option["label"]),
        )
        for option in options
    ]
    return el(
        "fieldset",
        el("legend", text=props["label"]) if props.get("label") else None,
        *boxes,
        class_name="aiui-checkbox-group",
    )


def render_confirmation(props: dict[str, Any], ctx: WidgetContext) -> Element:
    confirm = str(props.get("confirmAction") or "confirm")
    cancel = str(props.get("cancelAction") or "cancel")
    destructive = bool(props.get("destructive")) or props.get("variant") == "danger"
    variant = props.get("variant") or ("danger" if destructive else "info")
    return el(
        "div",
        el("h4", text=props["title"]) if props.get("title") else None,
        el("p", text=props.get("message", "")),
        el("p", text=props["details"], class_name="aiui-confirmation-details") if props.get("details") else None,
        action_button(cancel, props.get("cancelLabel") or "Cancel",
                      lambda: ctx.emit(cancel), disabled=ctx.disabled),
        action_button(confirm, props.get("confirmLabel") or "Confirm",
                      lambda: ctx.emit(confirm), primary=True,
                      destructive=destructive, disabled=ctx.disabled),
        role="alertdialog",
        class_name=f"aiui-confirmation aiui-confirmation--{variant}",
    )


def render_radio_group(props: dict[str, Any], ctx: WidgetContext) -> Element:
    name = props.get("name") or "radio"
    selected = str(initial_value(props))
    radios = [
        el(
            "label",
            el("input", type="radio", name=name, value=option["value"],
               checked=option["value"] == selected,
               disabled=disabled_attr(props, option.get("disabled"))),
            el("span", text=option["label"]),
        )
        for option in normalize_options(props.get("options"))
    ]
    return el(
        "fieldset",
        el("legend", text=props["label"]) if props.get("label") else None,
        *radios,
        role="radiogroup",
        data_orientation=props.get("orientation") or "vertical",
    )


def render_toggle(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el(
        "label",
        el("input", type="checkbox", role="switch", name=props.get("name"),
           checked=bool(initial_value(props, props.get("checked", False))),
           disabled=disabled_attr(props)),
        el("span", text=props.get("label", "")),
        class_name="aiui-toggle",
    )


def _number(value: Any, default: float | None) -> float | None:
    if value is None or value == "":
        return default
    return float(value)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def render_number_input(props: dict[str, Any], ctx: WidgetContext) -> Element:
    minimum = _number(props.get("min"), None)
    maximum = _number(props.get("max"), None)
    step = _number(props.get("step"), 1.0)
    value = ctx.state.get("value", _number(initial_value(props, None), minimum or 0.0))

    def clamp(candidate: float) -> float:
        if minimum is not None:
            candidate = max(minimum, candidate)
        if maximum is not None:
            candidate = min(maximum, candidate)
        return candidate

    def nudge(direction: int) -> None:
        ctx.state["value"] = clamp(ctx.state.get("value", value) + direction * step)

    control = el(
        "input",
        type="number",
        name=props.get("name"),
        value=_format_number(value),
        min=props.get("min"),
        max=props.get("max"),
        step=props.get("step"),
        disabled=disabled_attr(props),
    )
    stepper = el(
        "div",
        el("button", text="-", on_click=lambda: nudge(-1), aria_label="Decrease",
           disabled=disabled_attr(props, minimum is not None and value <= minimum)),
        control,
        el("button", text="+", on_click=lambda: nudge(1), aria_label="Increase",
           disabled=disabled_attr(props, maximum is not None and value >= maximum)),
        class_name="aiui-stepper",
    )
    return _field(props, stepper, "number")


def render_slider(props: dict[str, Any], ctx: WidgetContext) -> Element:
    minimum = _number(props.get("min"), 0.0)
    maximum = _number(props.get("max"), 100.0)
    value = min(max(_number(initial_value(props, None), minimum), minimum), maximum)
    control = el(
        "input",
        type="range",
        name=props.get("name"),
        value=_format_number(value),
        min=_format_number(minimum),
        max=_format_number(maximum),
        step=props.get("step"),
        disabled=disabled_attr(props),
    )
    readout = el("output", text=_format_number(value)) if props.get("showValue", True) else None
    return _field(props, el("div", control, readout), "range")


def render_file_upload(props: dict[str, Any], ctx: WidgetContext) -> Element:
    accept = props.get("accept")
    if isinstance(accept, list):
        accept = ",".join(str(item) for item in accept)
    control = el(
        "input",
        type="file",
        name=props.get("name"),
        value="",
        accept=accept,
        multiple=True if props.get("multiple") else None,
        disabled=disabled_attr(props),
    )
    hint = None
    if props.get("maxSize"):
        hint = el("small", text=f"Max size: {props['maxSize']} bytes")
    return el("div", _field(props, control, "file"), hint, class_name="aiui-upload")


def render_dropdown(props: dict[str, Any], ctx: WidgetContext) -> Element:
    options = normalize_options(props.get("options"))
    placeholder = props.get("placeholder")
    first = "" if placeholder or not options else options[0]["value"]
    selected = str(initial_value(props, first))
    option_elements = []
    if placeholder:
        option_elements.append(el("option", text=placeholder, value="", selected=True if selected == "" else None))
    option_elements.extend(
        el("option", text=option["label"], value=option["value"],
           selected=True if option["value"] == selected else None)
        for option in options
    )
    control = el(
        "select",
        *option_elements,
        name=props.get("name"),
        value=selected,
        disabled=disabled_attr(props),
    )
    return _field(props, control, "select")


def input_components() -> list[ComponentMetadata]:
    category = ComponentCategory.INPUTS
    return [
        component("MultipleChoice", category, "Single or multi-select question", render_multiple_choice),
        component("TextInput", category, "Single-line text input", render_text_input),
        component("TextArea", category, "Multi-line text input", render_text_area),
        component("Checkbox", category, "Checkbox or checkbox group", render_checkbox),
        component("Confirmation", category, "Confirm/cancel prompt", render_confirmation),
        component("RadioGroup", category, "Radio button group", render_radio_group),
        component("Toggle", category, "On/off switch", render_toggle),
        component("NumberInput", category, "Numeric input with stepper", render_number_input),
        component("Slider", category, "Range slider input", render_slider),
        component("FileUpload", category, "File picker input", render_file_upload),
        component("Dropdown", category, "Select dropdown input", render_dropdown),
    ]
