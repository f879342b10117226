from watson_developer_cloud.language_translator.v3 import LanguageTranslatorV3  # noqa: F401
