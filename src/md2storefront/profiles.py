"""Markup profiles.

A profile maps each block kind to the tags and classes used to render it.
``semantic`` uses heading, paragraph and list elements directly and suits
storefront descriptions; ``div`` wraps every block in a classed ``div``
and suits admin rich-text fields that restyle generic containers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class RenderProfile(str, Enum):
    SEMANTIC = "semantic"
    DIV_WRAPPED = "div"


# ---------------------------------------------------------------------------
# Profile vocabulary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProfileSpec:
    """Tag and class vocabulary for one :class:`RenderProfile`.

    Templates are ``str.format`` strings; ``{content}`` receives rendered
    inline HTML and ``{level}`` the heading level.
    """

    profile: RenderProfile
    heading: str
    paragraph: str
    blockquote: str
    divider: str
    # Paragraph lines are rendered one by one and joined with this
    # separator; None joins the raw lines into one whitespace-normalised
    # span before inline rendering.
    line_separator: Optional[str]
    # Wrapper around the <ol>/<ul> element, ``{kind}`` is
    # ``ordered`` or ``unordered``.
    list_wrapper: str = "{content}"
    # Fold the item after a colon-terminated unordered item into a
    # nested single-item list.
    nest_after_colon: bool = False


def _build_semantic() -> ProfileSpec:
    return ProfileSpec(
        profile=RenderProfile.SEMANTIC,
        heading="<h{level}>{content}</h{level}>",
        paragraph="<p>{content}</p>",
        blockquote="<blockquote>{content}</blockquote>",
        divider="<hr />",
        line_separator="<br />",
        nest_after_colon=True,
    )


def _build_div_wrapped() -> ProfileSpec:
    return ProfileSpec(
        profile=RenderProfile.DIV_WRAPPED,
        heading='<div class="heading heading-{level}">{content}</div>',
        paragraph='<div class="paragraph">{content}</div>',
        blockquote='<div class="blockquote">{content}</div>',
        divider='<div class="divider"></div>',
        line_separator=None,
        list_wrapper='<div class="list list-{kind}">{content}</div>',
    )


_PROFILE_BUILDERS = {
    RenderProfile.SEMANTIC: _build_semantic,
    RenderProfile.DIV_WRAPPED: _build_div_wrapped,
}

PROFILES = [p.value for p in _PROFILE_BUILDERS]


def get_profile(profile: Union[RenderProfile, str] = RenderProfile.SEMANTIC) -> ProfileSpec:
    """Return the :class:`ProfileSpec` for *profile* (member or value)."""
    try:
        key = RenderProfile(profile)
    except ValueError:
        raise ValueError(
            f"Unknown profile {profile!r}. Choose from: {', '.join(PROFILES)}"
        ) from None
    return _PROFILE_BUILDERS[key]()
