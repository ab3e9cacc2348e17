"""
Shared fixtures: one fully-populated valid record per collection and a
TestClient for the HTTP adapter.
"""

import copy
from datetime import date

import pytest
from fastapi.testclient import TestClient


VALID_RECORDS = {
    "projects": {
        "title": "Payments Platform Rebuild",
        "role": "Tech Lead",
        "year": 2023,
        "duration": "9 months",
        "teamSize": 6,
        "outcomeSummary": "Cut checkout failures by 40%",
        "overview": "Rebuilt the payments platform.",
        "problem": "Legacy monolith could not scale.",
        "constraints": ["No downtime", "PCI scope"],
        "approach": "Strangler fig migration.",
        "keyDecisions": [
            {
                "decision": "Use event sourcing",
                "reasoning": "Auditability",
                "alternatives": ["CRUD tables", "CDC"],
            }
        ],
        "techStack": ["Python", "PostgreSQL", "Kafka"],
        "impact": {
            "metrics": [{"label": "Failure rate", "value": "-40%"}],
            "qualitative": "On-call load dropped sharply.",
        },
        "learnings": ["Migrate reads first"],
        "featured": True,
        "status": "ongoing",
        "order": 1,
        "relatedProjects": ["billing-v2"],
        "relatedDecisions": ["event-sourcing"],
    },
    "decisions": {
        "title": "Adopt event sourcing",
        "date": date(2023, 3, 14),
        "context": "Need a full audit trail.",
        "decision": "Store events, derive state.",
        "alternatives": [
            {"option": "CRUD with audit table", "pros": ["Simple"], "cons": ["Drift"]},
        ],
        "reasoning": "Events are the source of truth.",
        "tags": ["architecture"],
        "relatedProjects": ["payments-platform"],
        "relatedDecisions": ["kafka-over-rabbitmq"],
    },
    "journey": {
        "date": date(2019, 6, 1),
        "title": "First staff role",
        "type": "milestone",
        "description": "Promoted to staff engineer.",
        "skills": ["Mentoring", "System design"],
    },
    "writing": {
        "title": "Migrating without downtime",
        "description": "How we moved payments off the monolith.",
        "publishDate": date(2024, 1, 15),
        "updatedDate": date(2024, 2, 1),
        "tags": ["migration"],
        "draft": True,
    },
    "uses": {
        "category": "tools",
        "items": [
            {"name": "Neovim", "description": "Editor", "url": "https://neovim.io"},
            {"name": "tmux", "description": "Terminal multiplexer"},
        ],
        "order": 2,
    },
    "speaking": {
        "title": "Event Sourcing in Practice",
        "description": "Lessons from production.",
        "event": "PyCon",
        "eventUrl": "https://pycon.org",
        "date": date(2024, 5, 17),
        "location": "Pittsburgh, USA",
        "type": "conference",
        "slides": "https://example.com/slides",
        "video": "https://example.com/video",
        "duration": "30 min",
        "topics": ["architecture"],
        "featured": True,
    },
    "testimonials": {
        "name": "Ada Example",
        "role": "VP Engineering",
        "company": "Acme",
        "relationship": "Managed me at Acme",
        "quote": "Consistently raised the bar.",
        "linkedin": "https://www.linkedin.com/in/ada-example",
        "featured": True,
        "date": date(2022, 11, 2),
    },
}


@pytest.fixture
def valid_records():
    """Deep copy so tests can mutate freely."""
    return copy.deepcopy(VALID_RECORDS)


@pytest.fixture
def client():
    from main import app
    return TestClient(app)
