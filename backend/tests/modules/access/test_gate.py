"""Tests for the access gate decision table."""

import itertools

import pytest

from modules.access.exceptions import UnhandledGateCaseError
from modules.access.gate import AccessGate
from modules.access.models import GateDecision, PageKind
from modules.auth.models import Identity, Profile, Session


IDENTITY = Identity(id="auth-123", email="test@example.com")
COMPLETE = Profile(id="p1", metadata={"setup_complete": True})
LOCATED = Profile(id="p1", home_location={"lat": -36.85, "lng": 174.76})
INCOMPLETE = Profile(id="p1")

SESSIONS = {
    "anonymous": Session.anonymous(),
    "no_profile": Session.authenticated(IDENTITY),
    "incomplete": Session.authenticated(IDENTITY, INCOMPLETE),
    "complete": Session.authenticated(IDENTITY, COMPLETE),
    "located": Session.authenticated(IDENTITY, LOCATED),
}

PAGES = {
    "public": "index.html",
    "root": "",
    "settings": "settings.html",
    "protected": "dashboard.html",
    "unclassified": "dashboard",
}

EXPECTED = {
    ("anonymous", "public"): None,
    ("anonymous", "root"): None,
    ("anonymous", "settings"): "index.html",
    ("anonymous", "protected"): "index.html",
    ("anonymous", "unclassified"): "index.html",
    ("no_profile", "public"): None,
    ("no_profile", "root"): None,
    ("no_profile", "settings"): "index.html",
    ("no_profile", "protected"): "index.html",
    ("no_profile", "unclassified"): "index.html",
    ("incomplete", "public"): "settings.html",
    ("incomplete", "root"): "settings.html",
    ("incomplete", "settings"): None,
    ("incomplete", "protected"): "settings.html",
    ("incomplete", "unclassified"): "settings.html",
    ("complete", "public"): "dashboard.html",
    ("complete", "root"): "dashboard.html",
    ("complete", "settings"): None,
    ("complete", "protected"): None,
    ("complete", "unclassified"): None,
    ("located", "public"): "dashboard.html",
    ("located", "root"): "dashboard.html",
    ("located", "settings"): None,
    ("located", "protected"): None,
    ("located", "unclassified"): None,
}


@pytest.fixture
def gate(page_registry):
    return AccessGate(page_registry)


class TestDecisionTable:
    @pytest.mark.parametrize("session_name,page_name", sorted(EXPECTED))
    def test_decision(self, gate, session_name, page_name):
        decision = gate.decide(SESSIONS[session_name], PAGES[page_name])
        assert decision.redirect_to == EXPECTED[(session_name, page_name)]

    def test_table_covers_every_combination(self):
        assert set(EXPECTED) == set(itertools.product(SESSIONS, PAGES))

    def test_decide_is_total_over_kinds(self, gate):
        """Every session state and page kind should produce a decision."""
        for session, page_kind in itertools.product(SESSIONS.values(), PageKind):
            assert isinstance(gate.decide_kind(session, page_kind), GateDecision)

    def test_decide_is_idempotent(self, gate):
        for session, page in itertools.product(SESSIONS.values(), PAGES.values()):
            assert gate.decide(session, page) == gate.decide(session, page)


class TestExamples:
    def test_anonymous_on_protected_goes_to_landing(self, gate):
        decision = gate.decide(Session.anonymous(), "dashboard")
        assert decision.redirect_to == "index.html"
        assert decision.rule == "anonymous"

    def test_complete_profile_on_landing_goes_to_dashboard(self, gate):
        decision = gate.decide(SESSIONS["complete"], "index.html")
        assert decision.redirect_to == "dashboard.html"
        assert decision.rule == "public_complete"

    def test_incomplete_profile_on_landing_goes_to_settings(self, gate):
        profile = Profile(id="p1", home_location=None, metadata={"setup_complete": False})
        decision = gate.decide(Session.authenticated(IDENTITY, profile), "index.html")
        assert decision.redirect_to == "settings.html"
        assert decision.rule == "public_incomplete"

    def test_missing_profile_goes_to_landing_not_settings(self, gate):
        """An identity without a profile is bounced, never looped on settings."""
        decision = gate.decide(SESSIONS["no_profile"], "settings.html")
        assert decision.redirect_to == "index.html"
        assert decision.rule == "missing_profile"

    def test_settings_always_reachable_with_profile(self, gate):
        decision = gate.decide(SESSIONS["incomplete"], "settings.html")
        assert decision.allowed
        assert decision.rule == "settings"


class TestUnhandledCase:
    def test_unknown_page_kind_fails_loudly(self, gate):
        """A combination outside the table must raise, not fall through."""
        with pytest.raises(UnhandledGateCaseError) as exc_info:
            gate.decide_kind(Session.anonymous(), "archived")
        assert exc_info.value.code == "UNHANDLED_GATE_CASE"
