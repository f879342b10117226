from watson_developer_cloud.visual_recognition.local_models import (  # noqa: F401
    LocalModelNotFoundError,
    LocalModelStore,
)
from watson_developer_cloud.visual_recognition.v3 import VisualRecognitionV3  # noqa: F401
from watson_developer_cloud.visual_recognition.v4 import VisualRecognitionV4  # noqa: F401
