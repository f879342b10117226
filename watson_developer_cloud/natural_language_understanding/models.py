"""
Typed options and results of the Natural Language Understanding V1
service.

Option fields are declared ``optional`` so that values equal to the
protobuf defaults (e.g. ``document=False``) are still sent when set.
"""

from google.protobuf import timestamp_pb2 as timestamp
import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.natural_language_understanding')


#########################
# Feature options
#########################

class CategoriesOptions(proto.Message):
    """
    Attributes:
        limit (int):
            Maximum number of categories to return.
        explanation (bool):
            Whether to return the text fragments that led to each
            category.
        model (str):
            ID of a custom categories model.
    """

    limit = proto.Field(proto.INT32, number=1, optional=True)
    explanation = proto.Field(proto.BOOL, number=2, optional=True)
    model = proto.Field(proto.STRING, number=3, optional=True)


class ConceptsOptions(proto.Message):
    limit = proto.Field(proto.INT32, number=1, optional=True)


class EmotionOptions(proto.Message):
    """
    Attributes:
        document (bool):
            Whether to return emotion of the whole document.
        targets (Sequence[str]):
            Phrases to analyze emotion toward.
    """

    document = proto.Field(proto.BOOL, number=1, optional=True)
    targets = proto.RepeatedField(proto.STRING, number=2)


class EntitiesOptions(proto.Message):
    """
    Attributes:
        limit (int):
            Maximum number of entities to return.
        mentions (bool):
            Whether to return the locations of entity mentions.
        model (str):
            ID of a custom entities model.
        sentiment (bool):
            Whether to return sentiment toward each entity.
        emotion (bool):
            Whether to return emotion toward each entity.
    """

    limit = proto.Field(proto.INT32, number=1, optional=True)
    mentions = proto.Field(proto.BOOL, number=2, optional=True)
    model = proto.Field(proto.STRING, number=3, optional=True)
    sentiment = proto.Field(proto.BOOL, number=4, optional=True)
    emotion = proto.Field(proto.BOOL, number=5, optional=True)


class KeywordsOptions(proto.Message):
    limit = proto.Field(proto.INT32, number=1, optional=True)
    sentiment = proto.Field(proto.BOOL, number=2, optional=True)
    emotion = proto.Field(proto.BOOL, number=3, optional=True)


class MetadataOptions(proto.Message):
    """No options; request ``metadata`` by setting an empty message."""


class RelationsOptions(proto.Message):
    model = proto.Field(proto.STRING, number=1, optional=True)


class SemanticRolesOptions(proto.Message):
    limit = proto.Field(proto.INT32, number=1, optional=True)
    keywords = proto.Field(proto.BOOL, number=2, optional=True)
    entities = proto.Field(proto.BOOL, number=3, optional=True)


class SentimentOptions(proto.Message):
    document = proto.Field(proto.BOOL, number=1, optional=True)
    targets = proto.RepeatedField(proto.STRING, number=2)


class SyntaxOptionsTokens(proto.Message):
    lemma = proto.Field(proto.BOOL, number=1, optional=True)
    part_of_speech = proto.Field(proto.BOOL, number=2, optional=True)


class SyntaxOptions(proto.Message):
    tokens = proto.Field(SyntaxOptionsTokens, number=1)
    sentences = proto.Field(proto.BOOL, number=2, optional=True)


class Features(proto.Message):
    """
    Features to analyze; at least one must be set.

    Attributes:
        categories (CategoriesOptions):
            Classify content into a hierarchical taxonomy.
        concepts (ConceptsOptions):
            Concepts that are not necessarily referenced in the text.
        emotion (EmotionOptions):
            Emotion conveyed by the content, or toward targets.
        entities (EntitiesOptions):
            People, places, organizations and other named entities.
        keywords (KeywordsOptions):
            Important keywords.
        metadata (MetadataOptions):
            Author, title, publication date and feeds of a web page.
        relations (RelationsOptions):
            Relations between entities.
        semantic_roles (SemanticRolesOptions):
            Subject, action and object parsed from sentences.
        sentiment (SentimentOptions):
            Positive or negative sentiment.
        syntax (SyntaxOptions):
            Tokens and sentences.
    """

    categories = proto.Field(CategoriesOptions, number=1)
    concepts = proto.Field(ConceptsOptions, number=2)
    emotion = proto.Field(EmotionOptions, number=3)
    entities = proto.Field(EntitiesOptions, number=4)
    keywords = proto.Field(KeywordsOptions, number=5)
    metadata = proto.Field(MetadataOptions, number=6)
    relations = proto.Field(RelationsOptions, number=7)
    semantic_roles = proto.Field(SemanticRolesOptions, number=8)
    sentiment = proto.Field(SentimentOptions, number=9)
    syntax = proto.Field(SyntaxOptions, number=10)


#########################
# Results
#########################

class EmotionScores(proto.Message):
    anger = proto.Field(proto.DOUBLE, number=1)
    disgust = proto.Field(proto.DOUBLE, number=2)
    fear = proto.Field(proto.DOUBLE, number=3)
    joy = proto.Field(proto.DOUBLE, number=4)
    sadness = proto.Field(proto.DOUBLE, number=5)


class FeatureSentimentResults(proto.Message):
    score = proto.Field(proto.DOUBLE, number=1)


class DocumentSentimentResults(proto.Message):
    label = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)


class TargetedSentimentResults(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)


class SentimentResult(proto.Message):
    document = proto.Field(DocumentSentimentResults, number=1)
    targets = proto.RepeatedField(TargetedSentimentResults, number=2)


class DocumentEmotionResults(proto.Message):
    emotion = proto.Field(EmotionScores, number=1)


class TargetedEmotionResults(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    emotion = proto.Field(EmotionScores, number=2)


class EmotionResult(proto.Message):
    document = proto.Field(DocumentEmotionResults, number=1)
    targets = proto.RepeatedField(TargetedEmotionResults, number=2)


class CategoriesResultExplanationRelevantText(proto.Message):
    text = proto.Field(proto.STRING, number=1)


class CategoriesResultExplanation(proto.Message):
    relevant_text = proto.RepeatedField(CategoriesResultExplanationRelevantText, number=1)


class CategoriesResult(proto.Message):
    """
    Attributes:
        label (str):
            Path of the category, e.g. ``/technology and computing``.
        score (float):
            Confidence of the category, in the range 0 to 1.
        explanation (CategoriesResultExplanation):
            Text fragments that led to the category, if requested.
    """

    label = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)
    explanation = proto.Field(CategoriesResultExplanation, number=3)


class ConceptsResult(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    relevance = proto.Field(proto.DOUBLE, number=2)
    dbpedia_resource = proto.Field(proto.STRING, number=3)


class DisambiguationResult(proto.Message):
    name = proto.Field(proto.STRING, number=1)
    dbpedia_resource = proto.Field(proto.STRING, number=2)
    subtype = proto.RepeatedField(proto.STRING, number=3)


class EntityMention(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    location = proto.RepeatedField(proto.INT32, number=2)
    confidence = proto.Field(proto.DOUBLE, number=3)


class EntitiesResult(proto.Message):
    """
    Attributes:
        type (str):
            Entity type, e.g. ``Person``.
        text (str):
            Name of the entity.
        relevance (float):
            Relevance to the document, in the range 0 to 1.
        confidence (float):
            Confidence in the entity identification.
        mentions (Sequence[EntityMention]):
            Locations of the entity in the text.
        count (int):
            Number of times the entity is mentioned.
        emotion (EmotionScores):
            Emotion toward the entity, if requested.
        sentiment (FeatureSentimentResults):
            Sentiment toward the entity, if requested.
        disambiguation (DisambiguationResult):
            Resources describing the entity.
    """

    type = proto.Field(proto.STRING, number=1)
    text = proto.Field(proto.STRING, number=2)
    relevance = proto.Field(proto.DOUBLE, number=3)
    confidence = proto.Field(proto.DOUBLE, number=4)
    mentions = proto.RepeatedField(EntityMention, number=5)
    count = proto.Field(proto.INT32, number=6)
    emotion = proto.Field(EmotionScores, number=7)
    sentiment = proto.Field(FeatureSentimentResults, number=8)
    disambiguation = proto.Field(DisambiguationResult, number=9)


class KeywordsResult(proto.Message):
    count = proto.Field(proto.INT32, number=1)
    relevance = proto.Field(proto.DOUBLE, number=2)
    text = proto.Field(proto.STRING, number=3)
    emotion = proto.Field(EmotionScores, number=4)
    sentiment = proto.Field(FeatureSentimentResults, number=5)


class Author(proto.Message):
    name = proto.Field(proto.STRING, number=1)


class Feed(proto.Message):
    link = proto.Field(proto.STRING, number=1)


class FeaturesResultsMetadata(proto.Message):
    authors = proto.RepeatedField(Author, number=1)
    publication_date = proto.Field(proto.STRING, number=2)
    title = proto.Field(proto.STRING, number=3)
    image = proto.Field(proto.STRING, number=4)
    feeds = proto.RepeatedField(Feed, number=5)


class RelationEntity(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    type = proto.Field(proto.STRING, number=2)


class RelationArgument(proto.Message):
    entities = proto.RepeatedField(RelationEntity, number=1)
    location = proto.RepeatedField(proto.INT32, number=2)
    text = proto.Field(proto.STRING, number=3)


class RelationsResult(proto.Message):
    score = proto.Field(proto.DOUBLE, number=1)
    sentence = proto.Field(proto.STRING, number=2)
    type = proto.Field(proto.STRING, number=3)
    arguments = proto.RepeatedField(RelationArgument, number=4)


class SemanticRolesResultSubject(proto.Message):
    text = proto.Field(proto.STRING, number=1)


class SemanticRolesVerb(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    tense = proto.Field(proto.STRING, number=2)


class SemanticRolesResultAction(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    normalized = proto.Field(proto.STRING, number=2)
    verb = proto.Field(SemanticRolesVerb, number=3)


class SemanticRolesResultObject(proto.Message):
    text = proto.Field(proto.STRING, number=1)


class SemanticRolesResult(proto.Message):
    sentence = proto.Field(proto.STRING, number=1)
    subject = proto.Field(SemanticRolesResultSubject, number=2)
    action = proto.Field(SemanticRolesResultAction, number=3)
    object = proto.Field(SemanticRolesResultObject, number=4)


class TokenResult(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    part_of_speech = proto.Field(proto.STRING, number=2)
    location = proto.RepeatedField(proto.INT32, number=3)
    lemma = proto.Field(proto.STRING, number=4)


class SentenceResult(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    location = proto.RepeatedField(proto.INT32, number=2)


class SyntaxResult(proto.Message):
    tokens = proto.RepeatedField(TokenResult, number=1)
    sentences = proto.RepeatedField(SentenceResult, number=2)


class AnalysisResultsUsage(proto.Message):
    features = proto.Field(proto.INT32, number=1)
    text_characters = proto.Field(proto.INT32, number=2)
    text_units = proto.Field(proto.INT32, number=3)


class AnalysisResults(proto.Message):
    """
    Results of ``analyze()``, for the requested features only.

    Attributes:
        language (str):
            Language of the analyzed text, e.g. ``en``.
        analyzed_text (str):
            Text analyzed, if ``return_analyzed_text`` was requested.
        retrieved_url (str):
            URL of the analyzed web page, if given.
        usage (AnalysisResultsUsage):
            Billing information.
    """

    language = proto.Field(proto.STRING, number=1)
    analyzed_text = proto.Field(proto.STRING, number=2)
    retrieved_url = proto.Field(proto.STRING, number=3)
    usage = proto.Field(AnalysisResultsUsage, number=4)
    concepts = proto.RepeatedField(ConceptsResult, number=5)
    entities = proto.RepeatedField(EntitiesResult, number=6)
    keywords = proto.RepeatedField(KeywordsResult, number=7)
    categories = proto.RepeatedField(CategoriesResult, number=8)
    emotion = proto.Field(EmotionResult, number=9)
    metadata = proto.Field(FeaturesResultsMetadata, number=10)
    relations = proto.RepeatedField(RelationsResult, number=11)
    semantic_roles = proto.RepeatedField(SemanticRolesResult, number=12)
    sentiment = proto.Field(SentimentResult, number=13)
    syntax = proto.Field(SyntaxResult, number=14)


class Model(proto.Message):
    """
    A custom model deployed to the service.

    Attributes:
        status (str):
            ``starting``, ``training``, ``deploying``, ``available``,
            ``error`` or ``deleted``.
        model_id (str):
            Unique ID of the model.
        language (str):
            Language of the model, e.g. ``en``.
        description (str):
            Description of the model.
        workspace_id (str):
            ID of the Watson Knowledge Studio workspace of the model.
        model_version (str):
            Version of the model.
        version_description (str):
            Description of the model version.
        created (datetime.datetime):
            When the model was created.
    """

    status = proto.Field(proto.STRING, number=1)
    model_id = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    description = proto.Field(proto.STRING, number=4)
    workspace_id = proto.Field(proto.STRING, number=5)
    model_version = proto.Field(proto.STRING, number=6)
    version_description = proto.Field(proto.STRING, number=7)
    created = proto.Field(timestamp.Timestamp, number=8)


class ListModelsResults(proto.Message):
    models = proto.RepeatedField(Model, number=1)


class DeleteModelResults(proto.Message):
    deleted = proto.Field(proto.STRING, number=1)
