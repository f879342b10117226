"""
Typed results of the AlchemyLanguage V1 service.

The service uses camelCase keys, converted to snake_case before decoding,
and encodes most numbers as strings, which protobuf's JSON parser accepts.
"""

import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.alchemy_language')


class KnowledgeGraph(proto.Message):
    type_hierarchy = proto.Field(proto.STRING, number=1)


class DisambiguatedLinks(proto.Message):
    """
    Links to linked-data resources describing an entity or concept.
    """

    name = proto.Field(proto.STRING, number=1)
    sub_type = proto.RepeatedField(proto.STRING, number=2)
    website = proto.Field(proto.STRING, number=3)
    geo = proto.Field(proto.STRING, number=4)
    dbpedia = proto.Field(proto.STRING, number=5)
    freebase = proto.Field(proto.STRING, number=6)
    yago = proto.Field(proto.STRING, number=7)
    opencyc = proto.Field(proto.STRING, number=8)
    ciafactbook = proto.Field(proto.STRING, number=9)
    census = proto.Field(proto.STRING, number=10)
    geonames = proto.Field(proto.STRING, number=11)
    music_brainz = proto.Field(proto.STRING, number=12)
    crunchbase = proto.Field(proto.STRING, number=13)


class Sentiment(proto.Message):
    """
    Attributes:
        type (str):
            ``positive``, ``negative`` or ``neutral``.
        score (float):
            Strength of the sentiment, from -1 to 1.
        mixed (str):
            ``1`` if both positive and negative sentiment were found.
    """

    type = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)
    mixed = proto.Field(proto.STRING, number=3)


class Quotation(proto.Message):
    quotation = proto.Field(proto.STRING, number=1)


class Entity(proto.Message):
    """
    A named entity.

    Attributes:
        type (str):
            Type of the entity, e.g. ``Person``.
        relevance (float):
            Relevance to the document, from 0 to 1.
        count (int):
            Number of times the entity is mentioned.
        text (str):
            The entity as written in the document.
        knowledge_graph (KnowledgeGraph):
            Type hierarchy, if requested.
        disambiguated (DisambiguatedLinks):
            Linked-data resources, if the entity was disambiguated.
        sentiment (Sentiment):
            Sentiment toward the entity, if requested.
        quotations (Sequence[Quotation]):
            Quotations attributed to the entity, if requested.
    """

    type = proto.Field(proto.STRING, number=1)
    relevance = proto.Field(proto.DOUBLE, number=2)
    count = proto.Field(proto.INT32, number=3)
    text = proto.Field(proto.STRING, number=4)
    knowledge_graph = proto.Field(KnowledgeGraph, number=5)
    disambiguated = proto.Field(DisambiguatedLinks, number=6)
    sentiment = proto.Field(Sentiment, number=7)
    quotations = proto.RepeatedField(Quotation, number=8)


class Entities(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)
    total_transactions = proto.Field(proto.INT32, number=5)
    entities = proto.RepeatedField(Entity, number=6)


class Keyword(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    relevance = proto.Field(proto.DOUBLE, number=2)
    knowledge_graph = proto.Field(KnowledgeGraph, number=3)
    sentiment = proto.Field(Sentiment, number=4)


class Keywords(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)
    total_transactions = proto.Field(proto.INT32, number=5)
    keywords = proto.RepeatedField(Keyword, number=6)


class Concept(proto.Message):
    """
    A concept, possibly not directly referenced in the document.

    Attributes:
        text (str):
            Name of the concept.
        relevance (float):
            Relevance to the document, from 0 to 1.
        knowledge_graph (KnowledgeGraph):
            Type hierarchy, if requested.
        website, geo, dbpedia, freebase, yago, opencyc, ciafactbook,
        census, geonames, music_brainz, crunchbase (str):
            Linked-data resources of the concept, if requested.
    """

    text = proto.Field(proto.STRING, number=1)
    relevance = proto.Field(proto.DOUBLE, number=2)
    knowledge_graph = proto.Field(KnowledgeGraph, number=3)
    website = proto.Field(proto.STRING, number=4)
    geo = proto.Field(proto.STRING, number=5)
    dbpedia = proto.Field(proto.STRING, number=6)
    freebase = proto.Field(proto.STRING, number=7)
    yago = proto.Field(proto.STRING, number=8)
    opencyc = proto.Field(proto.STRING, number=9)
    ciafactbook = proto.Field(proto.STRING, number=10)
    census = proto.Field(proto.STRING, number=11)
    geonames = proto.Field(proto.STRING, number=12)
    music_brainz = proto.Field(proto.STRING, number=13)
    crunchbase = proto.Field(proto.STRING, number=14)


class Concepts(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    total_transactions = proto.Field(proto.INT32, number=4)
    concepts = proto.RepeatedField(Concept, number=5)


class TargetedSentiment(proto.Message):
    text = proto.Field(proto.STRING, number=1)
    sentiment = proto.Field(Sentiment, number=2)


class SentimentResponse(proto.Message):
    """
    Sentiment of a document, or toward targets in it.

    Attributes:
        doc_sentiment (Sentiment):
            Sentiment of the document, or toward a single target.
        results (Sequence[TargetedSentiment]):
            Sentiment toward each of several targets.
    """

    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)
    total_transactions = proto.Field(proto.INT32, number=5)
    doc_sentiment = proto.Field(Sentiment, number=6)
    results = proto.RepeatedField(TargetedSentiment, number=7)


class Language(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    iso_639_1 = proto.Field(proto.STRING, number=4)
    iso_639_2 = proto.Field(proto.STRING, number=5)
    iso_639_3 = proto.Field(proto.STRING, number=6)
    ethnologue = proto.Field(proto.STRING, number=7)
    native_speakers = proto.Field(proto.STRING, number=8)
    wikipedia = proto.Field(proto.STRING, number=9)


class Title(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    title = proto.Field(proto.STRING, number=3)


class DocumentText(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)


class DocumentEmotions(proto.Message):
    anger = proto.Field(proto.DOUBLE, number=1)
    disgust = proto.Field(proto.DOUBLE, number=2)
    fear = proto.Field(proto.DOUBLE, number=3)
    joy = proto.Field(proto.DOUBLE, number=4)
    sadness = proto.Field(proto.DOUBLE, number=5)


class DocumentEmotion(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)
    doc_emotions = proto.Field(DocumentEmotions, number=5)


class Taxonomy(proto.Message):
    """
    Attributes:
        label (str):
            Path in the taxonomy, e.g. ``/art and entertainment/music``.
        score (float):
            Confidence of the label, from 0 to 1.
        confident (str):
            ``no`` if the service is not confident in the label.
    """

    label = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)
    confident = proto.Field(proto.STRING, number=3)


class Taxonomies(proto.Message):
    status = proto.Field(proto.STRING, number=1)
    url = proto.Field(proto.STRING, number=2)
    language = proto.Field(proto.STRING, number=3)
    text = proto.Field(proto.STRING, number=4)
    total_transactions = proto.Field(proto.INT32, number=5)
    taxonomy = proto.RepeatedField(Taxonomy, number=6)
