"""
Typed results of the Visual Recognition V3 service, and metadata of
locally stored models.
"""

from google.protobuf import timestamp_pb2 as timestamp
import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.visual_recognition.v3')


class Class(proto.Message):
    """
    A class of a custom classifier. The JSON key ``class`` is a Python
    keyword, hence ``class_``.
    """

    class_ = proto.Field(proto.STRING, number=1)


class Classifier(proto.Message):
    """
    Information about a classifier.

    Attributes:
        classifier_id (str):
            ID of the classifier.
        name (str):
            Name of the classifier.
        owner (str):
            Unique ID of the account that owns the classifier.
        status (str):
            Training status: ``ready``, ``training``, ``retraining`` or
            ``failed``.
        core_ml_enabled (bool):
            Whether the classifier can be downloaded as a Core ML model.
        explanation (str):
            If ``status`` is ``failed``, why training failed.
        created (datetime.datetime):
            When the classifier was created; None if not reported.
        classes (Sequence[Class]):
            Classes that define the classifier.
        retrained (datetime.datetime):
            When the classifier was last retrained; None if never.
        updated (datetime.datetime):
            When the classifier was last updated.
    """

    classifier_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)
    owner = proto.Field(proto.STRING, number=3)
    status = proto.Field(proto.STRING, number=4)
    core_ml_enabled = proto.Field(proto.BOOL, number=5)
    explanation = proto.Field(proto.STRING, number=6)
    created = proto.Field(timestamp.Timestamp, number=7)
    classes = proto.RepeatedField(Class, number=8)
    retrained = proto.Field(timestamp.Timestamp, number=9)
    updated = proto.Field(timestamp.Timestamp, number=10)


class Classifiers(proto.Message):
    classifiers = proto.RepeatedField(Classifier, number=1)


class ClassResult(proto.Message):
    """
    Result of one class of a classifier.

    Attributes:
        class_ (str):
            Name of the class.
        score (float):
            Confidence score for the image, in the range 0 to 1.
        type_hierarchy (str):
            Knowledge graph of the class, e.g. ``/fruit/pome/apple``.
    """

    class_ = proto.Field(proto.STRING, number=1)
    score = proto.Field(proto.DOUBLE, number=2)
    type_hierarchy = proto.Field(proto.STRING, number=3)


class ClassifierResult(proto.Message):
    name = proto.Field(proto.STRING, number=1)
    classifier_id = proto.Field(proto.STRING, number=2)
    classes = proto.RepeatedField(ClassResult, number=3)


class ErrorInfo(proto.Message):
    code = proto.Field(proto.INT32, number=1)
    description = proto.Field(proto.STRING, number=2)
    error_id = proto.Field(proto.STRING, number=3)


class ClassifiedImage(proto.Message):
    """
    Results for one image.

    Attributes:
        source_url (str):
            Source of the image before any redirects.
        resolved_url (str):
            Fully resolved URL of the image.
        image (str):
            Relative path of the image file, if uploaded directly.
        error (ErrorInfo):
            Set if the image could not be classified.
        classifiers (Sequence[ClassifierResult]):
            Results of each classifier.
    """

    source_url = proto.Field(proto.STRING, number=1)
    resolved_url = proto.Field(proto.STRING, number=2)
    image = proto.Field(proto.STRING, number=3)
    error = proto.Field(ErrorInfo, number=4)
    classifiers = proto.RepeatedField(ClassifierResult, number=5)


class WarningInfo(proto.Message):
    warning_id = proto.Field(proto.STRING, number=1)
    description = proto.Field(proto.STRING, number=2)


class ClassifiedImages(proto.Message):
    custom_classes = proto.Field(proto.INT32, number=1)
    images_processed = proto.Field(proto.INT32, number=2)
    images = proto.RepeatedField(ClassifiedImage, number=3)
    warnings = proto.RepeatedField(WarningInfo, number=4)


class LocalModelMetadata(proto.Message):
    """
    Stored next to a downloaded model, as ``<classifier_id>.json``.

    Attributes:
        classifier_id (str):
            ID of the classifier the model was downloaded from.
        name (str):
            Name of the classifier.
        status (str):
            Status of the classifier when downloaded.
        created (datetime.datetime):
            Creation time of the classifier.
        retrained (datetime.datetime):
            Last retraining time of the classifier, if retrained.
        downloaded (datetime.datetime):
            When the model was downloaded.
    """

    classifier_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)
    status = proto.Field(proto.STRING, number=3)
    created = proto.Field(timestamp.Timestamp, number=4)
    retrained = proto.Field(timestamp.Timestamp, number=5)
    downloaded = proto.Field(timestamp.Timestamp, number=6)
