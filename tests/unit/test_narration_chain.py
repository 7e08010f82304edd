"""
Unit tests for the narration fallback chain, the template provider and the
cloud provider (cloud client mocked).
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest

from neurolens.application.narration import (
    CloudNarrationProvider,
    NarrationFallbackChain,
    TemplateNarrationProvider,
)
from neurolens.application.narration.template_provider import answer_question, describe_scene, guide_navigation
from neurolens.core.exceptions import CloudNarrationError, NarrationUnavailableError
from neurolens.domain.models.detection import BoundingBox, Detection
from neurolens.domain.models.narration import NarrationKind, NarrationRequest, NarrationSource
from neurolens.domain.models.scene import Lighting, SceneSummary, SceneType
from neurolens.infrastructure.external.mistral_client import MistralChatClient


def _det(label, distance=None):
    return Detection(
        label=label,
        confidence=0.9,
        bounding_box=BoundingBox(0.1, 0.1, 0.2, 0.2),
        estimated_distance_meters=distance,
    )


@pytest.fixture
def living_room():
    return SceneSummary(
        objects=(_det("chair", 1.5), _det("couch", 4.0)),
        scene_type=SceneType.INDOOR,
        lighting=Lighting.MODERATE,
        dominant_color=(120, 110, 90),
        captured_at_epoch_millis=1,
    )


@pytest.fixture
def cloud_client():
    client = MagicMock(spec=MistralChatClient)
    client.has_credentials.return_value = True
    client.complete = AsyncMock(return_value="A cozy living room with a chair beside you.")
    return client


class TestTemplates:
    """Deterministic local narration"""

    def test_scene_close_and_far(self, living_room):
        assert describe_scene(living_room) == (
            "You're in a indoor area with moderate lighting. "
            "Close to you: chair. Further away: couch."
        )

    def test_scene_without_objects(self):
        summary = SceneSummary(scene_type=SceneType.STREET, lighting=Lighting.BRIGHT)
        assert describe_scene(summary) == (
            "You appear to be in a street area with bright lighting. "
            "No specific objects detected nearby."
        )

    def test_missing_distance_counts_as_far(self):
        summary = SceneSummary(objects=(_det("person"),))
        assert "Further away: person." in describe_scene(summary)
        assert "Close to you" not in describe_scene(summary)

    def test_scene_with_visible_text(self, living_room):
        assert describe_scene(living_room, "EXIT").endswith('Visible text: "EXIT".')

    def test_navigation_found(self):
        text = guide_navigation("door", [_det("chair", 1.0), _det("door", 3.5)])
        assert text == "door is approximately 4 meters ahead of you."

    def test_navigation_missing_distance_uses_five(self):
        assert guide_navigation("door", [_det("door")]) == "door is approximately 5 meters ahead of you."

    def test_navigation_not_found(self):
        assert guide_navigation("door", [_det("chair", 1.0)]) == (
            "I don't see a door in the current view. Try looking around."
        )

    @pytest.mark.parametrize(
        "question, expected",
        [
            ("What do you see?", "I can see chair, couch in this indoor area."),
            ("Where am I?", "You're in a indoor area."),
            ("How many things are here?", "I can see 2 objects."),
            ("Is it safe?", "I see 2 objects in this indoor area."),
        ],
    )
    def test_question_dispatch(self, living_room, question, expected):
        assert answer_question(question, living_room) == expected

    def test_question_nothing_visible(self):
        assert answer_question("what is here", SceneSummary()) == "I can't see any objects in this unknown area."


class TestFallbackChain:
    """Cloud first, template last; cloud failures never reach the caller"""

    @pytest.mark.asyncio
    async def test_cloud_result_used_when_available(self, cloud_client, living_room):
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        result = await chain.describe_scene(living_room)
        assert result.source == NarrationSource.CLOUD
        assert result.confidence == 0.95
        assert result.text == "A cozy living room with a chair beside you."
        model = cloud_client.complete.await_args.args[0]
        assert model == "mistral-small-latest"

    @pytest.mark.asyncio
    async def test_cloud_disabled_uses_template(self, cloud_client, living_room):
        chain = NarrationFallbackChain(
            [CloudNarrationProvider(cloud_client, enabled=False), TemplateNarrationProvider()]
        )
        result = await chain.describe_scene(living_room)
        assert result.source == NarrationSource.LOCAL
        assert result.confidence == 0.85
        assert result.text == (
            "You're in a indoor area with moderate lighting. "
            "Close to you: chair. Further away: couch."
        )
        cloud_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_key_skips_cloud(self, cloud_client, living_room):
        cloud_client.has_credentials.return_value = False
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        assert chain.cloud_available() is False
        result = await chain.describe_scene(living_room)
        assert result.source == NarrationSource.LOCAL
        cloud_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cloud_error_falls_back(self, cloud_client, living_room):
        cloud_client.complete.side_effect = CloudNarrationError("Mistral API error: 503", status_code=503)
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        result = await chain.describe_scene(living_room)
        assert result.source == NarrationSource.LOCAL
        assert "Close to you: chair." in result.text
        assert cloud_client.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back(self, cloud_client, living_room):
        cloud_client.complete.side_effect = RuntimeError("boom")
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        result = await chain.answer_question("how many", living_room)
        assert result.source == NarrationSource.LOCAL
        assert result.confidence == 0.75

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, cloud_client, living_room):
        async def slow(*args, **kwargs):
            await asyncio.sleep(5)
            return "too late"

        cloud_client.complete.side_effect = slow
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        result = await chain.guide_navigation("door", [_det("door", 3.2)], timeout_seconds=0.05)
        assert result.source == NarrationSource.LOCAL
        assert result.confidence == 0.80
        assert result.text == "door is approximately 3 meters ahead of you."

    @pytest.mark.asyncio
    async def test_cloud_confidences_per_kind(self, cloud_client, living_room):
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        navigation = await chain.guide_navigation("door", [])
        question = await chain.answer_question("what", living_room)
        image = await chain.describe_image(np.zeros((8, 8, 3), dtype=np.uint8))
        assert (navigation.confidence, question.confidence, image.confidence) == (0.96, 0.97, 0.98)

    @pytest.mark.asyncio
    async def test_image_uses_vision_model_and_data_url(self, cloud_client):
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client), TemplateNarrationProvider()])
        await chain.describe_image(np.zeros((8, 8, 3), dtype=np.uint8))
        model, messages = cloud_client.complete.await_args.args[:2]
        assert model == "pixtral-12b-2409"
        parts = messages[0]["content"]
        assert parts[1]["type"] == "image_url"
        assert parts[1]["image_url"]["url"].startswith("data:image/jpeg;base64,")

    @pytest.mark.asyncio
    async def test_image_without_cloud_is_unavailable(self):
        chain = NarrationFallbackChain([TemplateNarrationProvider()])
        with pytest.raises(NarrationUnavailableError):
            await chain.describe_image(np.zeros((8, 8, 3), dtype=np.uint8))

    @pytest.mark.asyncio
    async def test_every_provider_failing_raises(self, cloud_client):
        cloud_client.complete.side_effect = CloudNarrationError("down")
        chain = NarrationFallbackChain([CloudNarrationProvider(cloud_client)])
        with pytest.raises(NarrationUnavailableError):
            await chain.generate(NarrationRequest(kind=NarrationKind.SCENE))

    def test_empty_chain_rejected(self):
        with pytest.raises(ValueError):
            NarrationFallbackChain([])

    @pytest.mark.asyncio
    async def test_template_not_bounded_by_cloud_timeout(self, living_room):
        class SlowTemplate(TemplateNarrationProvider):
            async def try_generate(self, request, timeout_seconds=None):
                await asyncio.sleep(0.05)
                return await super().try_generate(request, timeout_seconds=timeout_seconds)

        chain = NarrationFallbackChain([SlowTemplate()], timeout_seconds=0.01)
        result = await chain.describe_scene(living_room)
        assert result.source == NarrationSource.LOCAL
        assert "Close to you: chair." in result.text

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout_rejected(self, timeout):
        with pytest.raises(ValueError):
            NarrationFallbackChain([TemplateNarrationProvider()], timeout_seconds=timeout)

    @pytest.mark.asyncio
    async def test_non_positive_call_timeout_rejected(self, living_room):
        chain = NarrationFallbackChain([TemplateNarrationProvider()])
        with pytest.raises(ValueError):
            await chain.describe_scene(living_room, timeout_seconds=0)
