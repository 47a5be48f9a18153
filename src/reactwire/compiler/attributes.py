"""HTML attribute name -> JSX prop name."""

from typing import Dict

HTML_TO_JSX: Dict[str, str] = {
    "accept-charset": "acceptCharset",
    "accesskey": "accessKey",
    "allowfullscreen": "allowFullScreen",
    "autocomplete": "autoComplete",
    "autofocus": "autoFocus",
    "autoplay": "autoPlay",
    "cellpadding": "cellPadding",
    "cellspacing": "cellSpacing",
    "charset": "charSet",
    "class": "className",
    "colspan": "colSpan",
    "contenteditable": "contentEditable",
    "contextmenu": "contextMenu",
    "crossorigin": "crossOrigin",
    "datetime": "dateTime",
    "enctype": "encType",
    "for": "htmlFor",
    "formaction": "formAction",
    "formenctype": "formEncType",
    "formmethod": "formMethod",
    "formnovalidate": "formNoValidate",
    "formtarget": "formTarget",
    "frameborder": "frameBorder",
    "hreflang": "hrefLang",
    "http-equiv": "httpEquiv",
    "inputmode": "inputMode",
    "marginheight": "marginHeight",
    "marginwidth": "marginWidth",
    "maxlength": "maxLength",
    "mediagroup": "mediaGroup",
    "minlength": "minLength",
    "novalidate": "noValidate",
    "readonly": "readOnly",
    "referrerpolicy": "referrerPolicy",
    "rowspan": "rowSpan",
    "spellcheck": "spellCheck",
    "srcdoc": "srcDoc",
    "srclang": "srcLang",
    "srcset": "srcSet",
    "tabindex": "tabIndex",
    "usemap": "useMap",
}

# Event names whose React spelling is not a plain capitalisation.
EVENT_NAMES: Dict[str, str] = {
    "animationend": "AnimationEnd",
    "animationiteration": "AnimationIteration",
    "animationstart": "AnimationStart",
    "compositionend": "CompositionEnd",
    "compositionstart": "CompositionStart",
    "compositionupdate": "CompositionUpdate",
    "contextmenu": "ContextMenu",
    "dblclick": "DoubleClick",
    "dragend": "DragEnd",
    "dragenter": "DragEnter",
    "dragexit": "DragExit",
    "dragleave": "DragLeave",
    "dragover": "DragOver",
    "dragstart": "DragStart",
    "keydown": "KeyDown",
    "keypress": "KeyPress",
    "keyup": "KeyUp",
    "loadeddata": "LoadedData",
    "loadedmetadata": "LoadedMetadata",
    "loadstart": "LoadStart",
    "mousedown": "MouseDown",
    "mouseenter": "MouseEnter",
    "mouseleave": "MouseLeave",
    "mousemove": "MouseMove",
    "mouseout": "MouseOut",
    "mouseover": "MouseOver",
    "mouseup": "MouseUp",
    "pointerdown": "PointerDown",
    "pointermove": "PointerMove",
    "pointerup": "PointerUp",
    "timeupdate": "TimeUpdate",
    "touchcancel": "TouchCancel",
    "touchend": "TouchEnd",
    "touchmove": "TouchMove",
    "touchstart": "TouchStart",
    "transitionend": "TransitionEnd",
    "volumechange": "VolumeChange",
}

SIMPLE_EVENTS = {
    "abort",
    "blur",
    "change",
    "click",
    "copy",
    "cut",
    "drag",
    "drop",
    "ended",
    "error",
    "focus",
    "input",
    "invalid",
    "load",
    "paste",
    "pause",
    "play",
    "playing",
    "reset",
    "scroll",
    "select",
    "submit",
    "toggle",
    "wheel",
}


def to_jsx(name: str) -> str:
    """Map an HTML attribute name to its JSX prop name.

    Names already in JSX spelling, ``data-*``/``aria-*`` attributes and
    component props pass through unchanged.
    """
    lowered = name.lower()
    if lowered in HTML_TO_JSX:
        return HTML_TO_JSX[lowered]

    if name.islower() and lowered.startswith("on"):
        event = lowered[2:]
        if event in EVENT_NAMES:
            return "on" + EVENT_NAMES[event]
        if event in SIMPLE_EVENTS:
            return "on" + event.capitalize()

    return name
