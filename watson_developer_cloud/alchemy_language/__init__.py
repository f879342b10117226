from watson_developer_cloud.alchemy_language.v1 import AlchemyLanguageV1  # noqa: F401
