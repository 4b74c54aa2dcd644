"""HTMLExporter: write a standalone HTML preview of a layout snapshot."""

from __future__ import annotations

import pathlib
from typing import Any, Sequence

import jinja2

from ..layout.snapshot import LayoutSnapshot
from .serializers import serialize_snapshot

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"


class HTMLExporter:
    """Render a snapshot as absolutely positioned boxes.

    The output is self-contained: styles and the snapshot JSON are embedded
    inline. Useful for eyeballing a layout without a host UI.
    """

    @staticmethod
    def render(
        snapshot: LayoutSnapshot,
        labels: Sequence[Sequence[Any]] | None = None,
        section_titles: Sequence[Any] | None = None,
        title: str = "section-grid",
    ) -> str:
        """Return the preview HTML as a string.

        Parameters
        ----------
        snapshot : LayoutSnapshot
        labels : per-section item labels, e.g. ``ListDataSource.sections()``.
            Must match the snapshot's item counts when given.
        section_titles : one header caption per section.
        title : HTML page title.
        """
        if labels is not None:
            counts = [len(items) for items in labels]
            if tuple(counts) != snapshot.item_counts:
                raise ValueError(
                    f"labels have item counts {counts} but the snapshot has "
                    f"{list(snapshot.item_counts)}."
                )
        if section_titles is not None and len(section_titles) != snapshot.number_of_sections:
            raise ValueError(
                f"Expected {snapshot.number_of_sections} section titles, "
                f"got {len(section_titles)}."
            )

        sections = []
        for i, section in enumerate(snapshot.sections):
            items = []
            for j, frame in enumerate(section.item_frames):
                label = labels[i][j] if labels is not None else f"{i}.{j}"
                items.append({"frame": frame, "label": str(label)})
            caption = section_titles[i] if section_titles is not None else f"Section {i}"
            sections.append({
                "header": section.header_frame,
                "caption": str(caption),
                "items": items,
            })

        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=True,
        )
        template = env.get_template("preview.html.j2")
        return template.render(
            title=title,
            content_size=snapshot.content_size,
            sections=sections,
            snapshot_json=serialize_snapshot(snapshot),
        )

    @staticmethod
    def export(
        path: str | pathlib.Path,
        snapshot: LayoutSnapshot,
        labels: Sequence[Sequence[Any]] | None = None,
        section_titles: Sequence[Any] | None = None,
        title: str = "section-grid",
    ) -> None:
        """Write the preview HTML to ``path``."""
        path = pathlib.Path(path)
        html = HTMLExporter.render(
            snapshot, labels=labels, section_titles=section_titles, title=title,
        )
        path.write_text(html, encoding="utf-8")
