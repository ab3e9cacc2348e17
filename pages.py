"""
Page Metadata for static pages

Single source of truth for the <title>, meta description and header copy of
every static page. Dynamic pages (a single project, an article) build their
metadata from content instead.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict


class PageId(str, Enum):
    HOME = "home"
    PROJECTS = "projects"
    DECISIONS = "decisions"
    JOURNEY = "journey"
    WRITING = "writing"
    SPEAKING = "speaking"
    USES = "uses"
    CONTACT = "contact"


class PageMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    heading: Optional[str] = None  # templates fall back to title
    intro: Optional[str] = None


class UnknownPageError(LookupError):
    pass


PAGES: Mapping[PageId, PageMeta] = MappingProxyType({
    # the home page title comes from the site config; this is its fallback
    PageId.HOME: PageMeta(
        title="Home",
        description="Engineering leader specializing in system architecture, technical decision-making, and delivering measurable business impact.",
    ),
    PageId.PROJECTS: PageMeta(
        title="Projects - Case Studies",
        description="Detailed case studies showcasing problem-solving approach, technical decisions, and measurable impact across various engineering projects.",
        heading="Projects",
        intro="Case studies that demonstrate how I approach complex problems, make technical decisions, and deliver measurable impact. Each project tells the story of the challenge, the constraints, the decisions made, and the outcomes achieved.",
    ),
    PageId.DECISIONS: PageMeta(
        title="Decisions - Architectural & Technical Choices",
        description="A log of architectural and technical decisions, documenting the context, alternatives considered, and reasoning behind key engineering choices.",
        heading="Decisions",
        intro="A transparent log of architectural and technical decisions I've made throughout my career. Each entry documents the context, alternatives considered, and the reasoning behind the choice.",
    ),
    PageId.JOURNEY: PageMeta(
        title="Journey - Career Growth & Learning Timeline",
        description="A chronological timeline of my professional journey, highlighting key milestones, learning moments, and career transitions that shaped my growth as an engineer.",
        heading="Journey",
        intro="A timeline of my professional growth and learning progression. This isn't a resume—it's a story of how I've evolved as an engineer, the pivotal moments that shaped my thinking, and the skills I've developed along the way.",
    ),
    PageId.WRITING: PageMeta(
        title="Writing - Technical Articles & Insights",
        description="Technical articles, insights, and lessons learned from building software systems and solving engineering challenges.",
        heading="Writing",
        intro="Technical articles, insights, and lessons learned from building software systems. I write about architecture decisions, engineering practices, and the challenges of delivering reliable software at scale.",
    ),
    PageId.SPEAKING: PageMeta(
        title="Speaking - Talks & Presentations",
        description="Conference talks, meetup presentations, podcast appearances, and workshops on software engineering, architecture, and technical leadership.",
        heading="Speaking",
        intro="I regularly speak at conferences, meetups, and on podcasts about software architecture, engineering practices, and technical leadership. Here's a collection of my talks and presentations.",
    ),
    PageId.USES: PageMeta(
        title="Uses - Tools, Stack & Environment",
        description="A comprehensive list of the tools, technologies, and environment I use for development work.",
        heading="Uses",
        intro="A transparent look at the tools, technologies, and environment that power my development workflow. This page documents what I use and why, helping other engineers discover useful tools and understand my technical context.",
    ),
    PageId.CONTACT: PageMeta(
        title="Contact - Get in Touch",
        description="Get in touch to discuss opportunities, collaborations, or technical challenges.",
        heading="Let's Talk",
    ),
})

_missing = [page.value for page in PageId if page not in PAGES]
if _missing:
    raise RuntimeError(f"no page metadata for: {', '.join(_missing)}")


def lookup(page_id: Union[PageId, str]) -> PageMeta:
    try:
        return PAGES[PageId(page_id)]
    except ValueError:
        raise UnknownPageError(page_id) from None
