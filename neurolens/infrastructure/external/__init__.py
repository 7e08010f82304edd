from .mistral_client import MistralChatClient, frame_to_data_url

__all__ = ["MistralChatClient", "frame_to_data_url"]
