from watson_developer_cloud.natural_language_understanding.v1 import NaturalLanguageUnderstandingV1  # noqa: F401
