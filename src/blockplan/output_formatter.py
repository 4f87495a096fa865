"""Format a render plan into summary, tree, and content previews."""

from __future__ import annotations

from typing import Iterable

from blockplan.markdown import blocks_to_markdown
from blockplan.schemas import PlannedSection, PlanPreview, RenderGroup, RenderPlan


def format_plan(plan: RenderPlan, *, title: str | None = None) -> PlanPreview:
    """Create summary, section tree, and Markdown content for a plan."""
    tree = "Sections:\n" + _create_sections_tree(plan)
    content = _render_content(plan)

    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    summary_lines.append(f"Pre-form sections: {len(plan.pre)}")
    summary_lines.append(f"Form: {plan.anchor.component if plan.anchor else 'none'}")
    summary_lines.append(f"Post-form sections: {len(plan.post)}")
    all_sections = [*plan.pre, *plan.post]
    summary_lines.append(
        f"Groups: {count_groups(all_sections, 'boxed')} boxed, "
        f"{count_groups(all_sections, 'breakout')} breakout"
    )

    return PlanPreview(summary="\n".join(summary_lines), sections_tree=tree, content=content)


def count_groups(sections: Iterable[PlannedSection], kind: str) -> int:
    """Count render groups of one kind across sections."""
    return sum(1 for section in sections for group in section.groups if group.kind == kind)


def _render_content(plan: RenderPlan) -> str:
    blocks: list[str] = []
    for section in plan.pre:
        blocks.append(f"## {section.title}")
        blocks.extend(_render_groups(section.groups))

    if plan.anchor:
        blocks.append(f"[form: {plan.anchor.component}]")

    for section in plan.post:
        blocks.append(f"<!-- section: {section.id} -->")
        blocks.extend(_render_groups(section.groups))

    return "\n\n".join(block for block in blocks if block).strip()


def _render_groups(groups: list[RenderGroup]) -> list[str]:
    rendered: list[str] = []
    for group in groups:
        content = blocks_to_markdown(group.blocks)
        if group.kind == "breakout":
            rendered.append(f"<!-- breakout -->\n{content}\n<!-- /breakout -->")
        else:
            rendered.append(content)
    return rendered


def _create_sections_tree(plan: RenderPlan) -> str:
    lines = ["    " + (section.title or "") for section in plan.pre]
    if plan.anchor:
        lines.append(f"    [form: {plan.anchor.component}]")
    lines.extend("    #" + (section.id or "") for section in plan.post)
    return "\n".join(lines)
