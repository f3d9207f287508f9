import random

import pytest

from ldgraph.model.identity import IdentityGenerator
from ldgraph.model.keys import KeyResolver
from ldgraph.service import LinkedGraph
from ldgraph.settings import LinkedGraphSettings

BASE = "http://sample.domain/ontologies/"
CORE = BASE + "core#"
DISPLAY = BASE + "display#"
ACCESS = BASE + "access#"
META = "http://sample.domain/api/v1/meta/"

SUBJECT_UUID = "b35fc8ee-1f65-4884-afc4-593e5fa0aa47"
SUBJECT_ID = META + SUBJECT_UUID
BLANK_UUID = "aa5f042a-0687-4842-afde-c72f46b54754"


@pytest.fixture
def resolver():
    return KeyResolver(BASE, "core#")


@pytest.fixture
def identity(resolver):
    return IdentityGenerator(
        resolver,
        "http://sample.domain",
        "/api/v1",
        "/meta/",
        token_factory=lambda: BLANK_UUID,
        rng=random.Random(7),
    )


@pytest.fixture
def graph():
    return LinkedGraph.from_settings(
        LinkedGraphSettings(), token_factory=lambda: BLANK_UUID, with_clients=False
    )


@pytest.fixture
def scenario():
    """A scenario whose collection set sits before it in the node list."""
    return {
        "@graph": [
            {
                "@id": "_:b5",
                "@type": ACCESS + "CollectionSet",
                CORE + "element": [
                    "e4108e4b-6b29-4b27-bb72-a6ebaf5ba43c",
                    "",
                    "58e34951-2dcd-4e05-b660-803be70ed538",
                ],
            },
            {
                "@id": SUBJECT_ID,
                "@type": CORE + "Scenario",
                CORE + "displayName": ["Title"],
                DISPLAY + "collections": [{"@id": "_:b5"}],
            },
        ]
    }
