"""
Typed results of the Visual Recognition V4 service.
"""

from google.protobuf import timestamp_pb2 as timestamp
import proto

# Used to compile protobufs into Python classes.
__protobuf__ = proto.module(package='watson_developer_cloud.visual_recognition.v4')


class Location(proto.Message):
    """
    Bounding box of an object, in pixels from the top-left corner.
    """

    top = proto.Field(proto.INT32, number=1)
    left = proto.Field(proto.INT32, number=2)
    width = proto.Field(proto.INT32, number=3)
    height = proto.Field(proto.INT32, number=4)


class TrainingDataObject(proto.Message):
    """
    An object labeled in an image, for training.

    Attributes:
        object (str):
            Name of the object.
        location (Location):
            Bounding box of the object.
    """

    object = proto.Field(proto.STRING, number=1)
    location = proto.Field(Location, number=2)


class TrainingDataObjects(proto.Message):
    objects = proto.RepeatedField(TrainingDataObject, number=1)


class ObjectTrainingStatus(proto.Message):
    """
    Training status of the objects of a collection.

    Attributes:
        ready (bool):
            Whether a model is trained and ready for analysis.
        in_progress (bool):
            Whether training is in progress.
        data_changed (bool):
            Whether the training data changed since the last training.
        latest_failed (bool):
            Whether the latest training failed.
        rscnn_ready (bool):
            Whether the model can be downloaded for on-device use.
        description (str):
            Details about the training status.
    """

    ready = proto.Field(proto.BOOL, number=1)
    in_progress = proto.Field(proto.BOOL, number=2)
    data_changed = proto.Field(proto.BOOL, number=3)
    latest_failed = proto.Field(proto.BOOL, number=4)
    rscnn_ready = proto.Field(proto.BOOL, number=5)
    description = proto.Field(proto.STRING, number=6)


class CollectionTrainingStatus(proto.Message):
    objects = proto.Field(ObjectTrainingStatus, number=1)


class Collection(proto.Message):
    """
    A collection of images used to train object detection.

    Attributes:
        collection_id (str):
            ID of the collection.
        name (str):
            Name of the collection.
        description (str):
            Description of the collection.
        created (datetime.datetime):
            When the collection was created.
        updated (datetime.datetime):
            When the collection was last updated.
        image_count (int):
            Number of images in the collection.
        training_status (CollectionTrainingStatus):
            Training status of the collection.
    """

    collection_id = proto.Field(proto.STRING, number=1)
    name = proto.Field(proto.STRING, number=2)
    description = proto.Field(proto.STRING, number=3)
    created = proto.Field(timestamp.Timestamp, number=4)
    updated = proto.Field(timestamp.Timestamp, number=5)
    image_count = proto.Field(proto.INT32, number=6)
    training_status = proto.Field(CollectionTrainingStatus, number=7)


class CollectionsList(proto.Message):
    collections = proto.RepeatedField(Collection, number=1)


class ImageSource(proto.Message):
    """
    Where an image came from.

    Attributes:
        type (str):
            ``file`` or ``url``.
        filename (str):
            Name of the uploaded file.
        archive_filename (str):
            Name of the archive the file was extracted from, if any.
        source_url (str):
            Source of the image before any redirects.
        resolved_url (str):
            Fully resolved URL of the image.
    """

    type = proto.Field(proto.STRING, number=1)
    filename = proto.Field(proto.STRING, number=2)
    archive_filename = proto.Field(proto.STRING, number=3)
    source_url = proto.Field(proto.STRING, number=4)
    resolved_url = proto.Field(proto.STRING, number=5)


class ImageDimensions(proto.Message):
    height = proto.Field(proto.INT32, number=1)
    width = proto.Field(proto.INT32, number=2)


class ErrorInfo(proto.Message):
    code = proto.Field(proto.STRING, number=1)
    message = proto.Field(proto.STRING, number=2)
    more_info = proto.Field(proto.STRING, number=3)


class WarningInfo(proto.Message):
    code = proto.Field(proto.STRING, number=1)
    message = proto.Field(proto.STRING, number=2)
    more_info = proto.Field(proto.STRING, number=3)


class ObjectDetail(proto.Message):
    """
    An object detected in an image.

    Attributes:
        object (str):
            Name of the object.
        location (Location):
            Bounding box of the object.
        score (float):
            Confidence score, in the range 0 to 1.
    """

    object = proto.Field(proto.STRING, number=1)
    location = proto.Field(Location, number=2)
    score = proto.Field(proto.DOUBLE, number=3)


class CollectionObjects(proto.Message):
    collection_id = proto.Field(proto.STRING, number=1)
    objects = proto.RepeatedField(ObjectDetail, number=2)


class DetectedObjects(proto.Message):
    collections = proto.RepeatedField(CollectionObjects, number=1)


class Image(proto.Message):
    """
    Analysis results of one image.

    Attributes:
        source (ImageSource):
            Where the image came from.
        dimensions (ImageDimensions):
            Height and width of the image.
        objects (DetectedObjects):
            Objects detected, per collection.
        errors (Sequence[ErrorInfo]):
            Problems analyzing the image.
        trace_id (str):
            ID for IBM support.
    """

    source = proto.Field(ImageSource, number=1)
    dimensions = proto.Field(ImageDimensions, number=2)
    objects = proto.Field(DetectedObjects, number=3)
    errors = proto.RepeatedField(ErrorInfo, number=4)
    trace_id = proto.Field(proto.STRING, number=5)


class AnalyzeResponse(proto.Message):
    images = proto.RepeatedField(Image, number=1)
    warnings = proto.RepeatedField(WarningInfo, number=2)
    trace = proto.Field(proto.STRING, number=3)


class ImageDetails(proto.Message):
    """
    An image stored in a collection.

    Attributes:
        image_id (str):
            ID of the image.
        updated (datetime.datetime):
            When the image was last updated.
        created (datetime.datetime):
            When the image was added.
        source (ImageSource):
            Where the image came from.
        dimensions (ImageDimensions):
            Height and width of the image.
        errors (Sequence[ErrorInfo]):
            Problems adding the image.
        training_data (TrainingDataObjects):
            Objects labeled in the image.
    """

    image_id = proto.Field(proto.STRING, number=1)
    updated = proto.Field(timestamp.Timestamp, number=2)
    created = proto.Field(timestamp.Timestamp, number=3)
    source = proto.Field(ImageSource, number=4)
    dimensions = proto.Field(ImageDimensions, number=5)
    errors = proto.RepeatedField(ErrorInfo, number=6)
    training_data = proto.Field(TrainingDataObjects, number=7)


class ImageDetailsList(proto.Message):
    images = proto.RepeatedField(ImageDetails, number=1)
    warnings = proto.RepeatedField(WarningInfo, number=2)
    trace = proto.Field(proto.STRING, number=3)


class ImageSummary(proto.Message):
    image_id = proto.Field(proto.STRING, number=1)
    updated = proto.Field(timestamp.Timestamp, number=2)


class ImageSummaryList(proto.Message):
    images = proto.RepeatedField(ImageSummary, number=1)


class ObjectMetadata(proto.Message):
    object = proto.Field(proto.STRING, number=1)
    count = proto.Field(proto.INT32, number=2)


class ObjectMetadataList(proto.Message):
    object_count = proto.Field(proto.INT32, number=1)
    objects = proto.RepeatedField(ObjectMetadata, number=2)


class UpdateObjectMetadata(proto.Message):
    object = proto.Field(proto.STRING, number=1)
    count = proto.Field(proto.INT32, number=2)


class TrainingEvent(proto.Message):
    """
    A training of a collection.

    Attributes:
        type (str):
            ``objects``.
        collection_id (str):
            The collection that was trained.
        completion_time (datetime.datetime):
            When training completed.
        status (str):
            ``failed`` or ``succeeded``.
        image_count (int):
            Number of images trained on.
    """

    type = proto.Field(proto.STRING, number=1)
    collection_id = proto.Field(proto.STRING, number=2)
    completion_time = proto.Field(timestamp.Timestamp, number=3)
    status = proto.Field(proto.STRING, number=4)
    image_count = proto.Field(proto.INT32, number=5)


class TrainingEvents(proto.Message):
    start_time = proto.Field(timestamp.Timestamp, number=1)
    end_time = proto.Field(timestamp.Timestamp, number=2)
    completed_events = proto.Field(proto.INT32, number=3)
    trained_images = proto.Field(proto.INT32, number=4)
    events = proto.RepeatedField(TrainingEvent, number=5)
