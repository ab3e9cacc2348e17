"""
Content Schemas for the Portfolio Site

Each Collection = one folder of MDX documents (<content root>/<name>) whose
front-matter is validated against the collection's field descriptors.
"""

import logging
from functools import cached_property
from posixpath import join as join_path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel

import settings
from descriptors import FieldSpec, array, boolean, date, enum, number, obj, optional, string, url
from validation import compile_model, validate_record

logger = logging.getLogger(__name__)


class UnknownCollectionError(KeyError):
    pass


class Collection:
    """One content collection: where its documents live and what they must contain."""

    def __init__(
        self,
        name: str,
        fields: Mapping[str, FieldSpec],
        pattern: Optional[str] = None,
        base: Optional[str] = None,
    ):
        self.name = name
        self.fields = MappingProxyType(dict(fields))
        self.pattern = pattern or settings.CONTENT_PATTERN
        self.base = base or join_path(settings.CONTENT_ROOT, name)

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, pattern={self.pattern!r}, base={self.base!r})"

    @cached_property
    def model(self) -> Type[BaseModel]:
        logger.debug("Compiling schema for %s", self.name)
        return compile_model(f"{self.name.title()}Record", self.fields)

    def validate(self, raw: Any) -> BaseModel:
        return validate_record(self.model, raw, collection=self.name)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "base": self.base,
            "fields": {name: spec.describe() for name, spec in self.fields.items()},
        }


# Case studies: overview -> problem -> constraints -> approach -> decisions -> impact -> learnings
projects = Collection("projects", {
    "title": string(),
    "role": string(),
    "year": number(),
    "duration": optional(string()),  # e.g. "3 months"
    "teamSize": optional(number()),
    "outcomeSummary": string(),
    "overview": string(),
    "problem": string(),
    "constraints": array(string()),
    "approach": string(),
    "keyDecisions": array(obj(
        decision=string(),
        reasoning=string(),
        alternatives=optional(array(string())),
    )),
    "techStack": array(string()),
    "impact": obj(
        metrics=optional(array(obj(label=string(), value=string()))),
        qualitative=string(),
    ),
    "learnings": array(string()),
    "featured": boolean(default=False),
    "status": enum("completed", "ongoing", "archived", default="completed"),
    "order": optional(number()),  # lower first
    # slugs, not checked against existing entries
    "relatedProjects": optional(array(string())),
    "relatedDecisions": optional(array(string())),
})

# Architecture / technical decision records
decisions = Collection("decisions", {
    "title": string(),
    "date": date(),
    "context": string(),
    "decision": string(),
    "alternatives": array(obj(
        option=string(),
        pros=optional(array(string())),
        cons=optional(array(string())),
    )),
    "reasoning": string(),
    "tags": optional(array(string())),
    "relatedProjects": optional(array(string())),
    "relatedDecisions": optional(array(string())),
})

journey = Collection("journey", {
    "date": date(),
    "title": string(),
    "type": enum("milestone", "learning", "transition"),
    "description": string(),
    "skills": optional(array(string())),
})

writing = Collection("writing", {
    "title": string(),
    "description": string(),
    "publishDate": date(),
    "updatedDate": optional(date()),
    "tags": optional(array(string())),
    "draft": boolean(default=False),
})

uses = Collection("uses", {
    "category": enum("tools", "stack", "environment"),
    "items": array(obj(
        name=string(),
        description=string(),
        url=optional(url()),
    )),
    "order": number(),
})

speaking = Collection("speaking", {
    "title": string(),
    "description": string(),
    "event": string(),
    "eventUrl": optional(url()),
    "date": date(),
    "location": string(),  # city, country or "Online"
    "type": enum("conference", "meetup", "podcast", "workshop", "webinar"),
    "slides": optional(url()),
    "video": optional(url()),
    "duration": optional(string()),
    "topics": optional(array(string())),
    "featured": boolean(default=False),
})

testimonials = Collection("testimonials", {
    "name": string(),
    "role": string(),
    "company": string(),
    "relationship": string(),
    "quote": string(),
    "linkedin": optional(url()),
    "featured": boolean(default=False),
    "date": date(),
})


COLLECTIONS: Mapping[str, Collection] = MappingProxyType({
    c.name: c
    for c in (projects, decisions, journey, writing, uses, speaking, testimonials)
})


def get_collection(name: str) -> Collection:
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise UnknownCollectionError(name) from None


def validate(name: str, raw: Any) -> BaseModel:
    return get_collection(name).validate(raw)
