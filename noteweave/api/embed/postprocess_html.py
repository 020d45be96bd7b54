"""Decorate app-internal links in rendered HTML (UNO: single function)."""

import html as html_lib

from ._constants import LINK_HREF_PREFIX

ANCHOR_CLOSE = "</a>"
CLASS_ATTR = 'class="'


def _escape(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def postprocess_html(html: str) -> str:
    """Style resolved note links and replace unresolved ones with a broken marker.

    Expects anchors shaped the way the markdown renderer emits them: one
    ``href="..."`` attribute, an optional ``class="..."`` and content up to
    the next ``</a>``. Anchors with an empty path become
    ``<span class="obs-link broken">text</span>``; the rest gain the
    ``obs-link`` class and a ``data-obs-path`` attribute.
    """
    out: list[str] = []
    last = 0
    pos = html.find(LINK_HREF_PREFIX)
    while pos != -1:
        tag_start = html.rfind("<", 0, pos)
        if tag_start == -1:
            tag_start = pos
        path_start = pos + len(LINK_HREF_PREFIX)
        path_end = html.find('"', path_start)
        if path_end == -1:
            break
        open_gt = html.find(">", path_end + 1)
        inner_start = path_end + 1 if open_gt == -1 else open_gt + 1
        inner_end = html.find(ANCHOR_CLOSE, inner_start)
        if inner_end == -1:
            break

        path = html[path_start:path_end]
        inner = html[inner_start:inner_end]
        out.append(html[last:tag_start])
        if not path:
            text = _escape(html_lib.unescape(inner))
            out.append(f'<span class="obs-link broken">{text}</span>')
        else:
            open_tag = html[tag_start:inner_start]
            before_gt = open_tag.rfind(">")
            if before_gt == -1:
                before_gt = len(open_tag)
            attrs = open_tag[:before_gt]
            data_attr = f' data-obs-path="{_escape(path)}"'
            class_pos = attrs.find(CLASS_ATTR)
            if class_pos != -1:
                split = class_pos + len(CLASS_ATTR)
                out.append(f"{attrs[:split]}obs-link {attrs[split:]}{data_attr}")
            else:
                out.append(f'{attrs} class="obs-link"{data_attr}')
            out.append(open_tag[before_gt:])
            out.append(inner)
            out.append(ANCHOR_CLOSE)

        last = inner_end + len(ANCHOR_CLOSE)
        pos = html.find(LINK_HREF_PREFIX, last)

    out.append(html[last:])
    return "".join(out)
