from .classifier import SceneClassifier, SCENE_RULES

__all__ = ["SceneClassifier", "SCENE_RULES"]
