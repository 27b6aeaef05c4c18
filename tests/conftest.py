"""Shared fixtures: scripted generation backend and in-memory collaborators."""

import asyncio
import io
import os

# Settings are read at import time
os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ.setdefault("CONTEXT_BACKEND", "memory")
os.environ.setdefault("S3_BUCKET_ENDPOINT", "http://storage.test")

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from backend.app.core.errors import ObjectStoreError
from backend.app.main_api import create_app
from backend.app.services.context_store import InMemoryContextStore
from backend.app.services.generation import GenerationClient
from backend.app.services.record_store import RecordStore

ENDPOINT = "http://storage.test"


class ScriptedLLM:
    """
    Answers each prompt by the kind of request it contains and records every
    prompt it was given. `fail_on` makes matching prompts raise instead.
    """

    def __init__(self, fail_on=None, delay=0.0, empty=False):
        self.prompts = []
        self.fail_on = fail_on
        self.delay = delay
        self.empty = empty
        self.in_flight = 0
        self.max_in_flight = 0

    async def ainvoke(self, prompt):
        self.prompts.append(prompt)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if self.fail_on and self.fail_on in prompt:
            raise RuntimeError("backend unavailable")
        if self.empty:
            return AIMessage(content="")
        if "100 word introduction" in prompt:
            return AIMessage(content="\nI am a seasoned engineer.")
        if "soft skills" in prompt:
            return AIMessage(content="\n1. Communication\n2. Teamwork")
        if "50 words for each company" in prompt:
            return AIMessage(content="\n1. At Acme I shipped things.")
        if "cold email" in prompt:
            return AIMessage(content="\nHi R, I would love to join Acme Corp. My CV is attached.")
        return AIMessage(content="unexpected prompt")


class InMemoryObjectStore:
    def __init__(self, endpoint=ENDPOINT, bucket="files", fail_delete=False):
        self.endpoint = endpoint
        self.bucket = bucket
        self.objects = {}
        self.fail_delete = fail_delete
        self._counter = 0

    async def upload(self, fileobj, filename=None, content_type=None, field_name=None):
        self._counter += 1
        key = f"key{self._counter}"
        self.objects[key] = {
            "body": fileobj.read(),
            "content_type": content_type,
            "field_name": field_name,
        }
        return f"{self.endpoint}/{self.bucket}/{key}"

    async def exists(self, key):
        return key in self.objects

    async def delete(self, key):
        if self.fail_delete:
            raise ObjectStoreError("Could not delete file")
        self.objects.pop(key, None)


@pytest.fixture
def llm():
    return ScriptedLLM()


@pytest.fixture
def object_store():
    return InMemoryObjectStore()


@pytest.fixture
def context_store():
    return InMemoryContextStore()


@pytest.fixture
def record_store():
    return RecordStore()


@pytest.fixture
def make_client(object_store, context_store, record_store):
    def _make(llm, timeout=5.0):
        app = create_app(
            generation_client=GenerationClient(llm, timeout=timeout),
            object_store=object_store,
            context_store=context_store,
            record_store=record_store,
        )
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, llm):
    return make_client(llm)


def image_file(name="headshot.png"):
    return (name, io.BytesIO(b"\x89PNG fake image"), "image/png")
