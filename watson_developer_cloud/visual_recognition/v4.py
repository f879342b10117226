"""
Visual Recognition V4: train object detection on collections of images,
and analyze images with trained collections.
"""

import datetime

from watson_developer_cloud.common import rest
from watson_developer_cloud.common.rest import MultipartForm
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.visual_recognition import models_v4 as models
from watson_developer_cloud.visual_recognition.v3 import DEFAULT_SERVICE_URL
from watson_developer_cloud.visual_recognition.v3 import SERVICE_NAME


def format_date(date):
    """Render a date or datetime as YYYY-MM-DD; pass strings through."""
    if date is None or isinstance(date, str):
        return date
    if isinstance(date, datetime.datetime):
        date = date.date()
    return date.strftime('%Y-%m-%d')


def _append_images(form, images_file, image_url):
    for image in images_file or []:
        if not isinstance(image, FileWithMetadata):
            image = FileWithMetadata(image)
        image.append_to(form, 'images_file')
    for url in image_url or []:
        form.append('image_url', url)


class VisualRecognitionV4(WatsonService):
    """
    Client of the Visual Recognition V4 service.

    Args:
        version (str):
            API version date, e.g. ``2019-02-11``.
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from ``WATSON_VISION_COMBINED_*``
            environment variables or the credentials file.
        service_url (str):
            Base URL of the service instance.
        session (Union[requests.Session, None]):
            Session to send requests with.
    """

    service_version = 'V4'

    def __init__(self, version, authenticator=None, service_url=DEFAULT_SERVICE_URL, session=None):
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=authenticator,
            version=version,
            session=session,
        )

    #########################
    # Analysis
    #########################

    def analyze(self, collection_ids, features, images_file=None, image_url=None, threshold=None, headers=None):
        """
        Analyze images for objects, with the models of collections.

        Args:
            collection_ids (Sequence[str]):
                Collections whose models to use.
            features (Sequence[str]):
                Features to analyze, e.g. ``['objects']``.
            images_file (Union[Sequence[Union[bytes, str, BinaryIO, FileWithMetadata]], None]):
                Images, or .zip files of images, to analyze.
            image_url (Union[Sequence[str], None]):
                URLs of images to analyze.
            threshold (Union[float, None]):
                Minimum score an object must have to be returned.

        Returns:
            DetailedResponse:
                With an ``AnalyzeResponse`` result.
        """
        form = MultipartForm()
        for collection_id in collection_ids:
            form.append('collection_ids', collection_id)
        for feature in features:
            form.append('features', feature)
        _append_images(form, images_file, image_url)
        if threshold is not None:
            form.append('threshold', threshold)

        request = self.prepare_request(
            'POST', '/v4/analyze', 'analyze', headers=headers, form=form, accept='application/json',
        )
        return self.send(request, model_decoder(models.AnalyzeResponse))

    #########################
    # Collections
    #########################

    def create_collection(self, name=None, description=None, headers=None):
        request = self.prepare_request(
            'POST',
            '/v4/collections',
            'create_collection',
            headers=headers,
            json_body={'name': name, 'description': description},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.Collection))

    def list_collections(self, headers=None):
        request = self.prepare_request(
            'GET', '/v4/collections', 'list_collections', headers=headers, accept='application/json',
        )
        return self.send(request, model_decoder(models.CollectionsList))

    def get_collection(self, collection_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}', collection_id),
            'get_collection',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Collection))

    def update_collection(self, collection_id, name=None, description=None, headers=None):
        request = self.prepare_request(
            'POST',
            encode_path('/v4/collections/{}', collection_id),
            'update_collection',
            headers=headers,
            json_body={'name': name, 'description': description},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.Collection))

    def delete_collection(self, collection_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v4/collections/{}', collection_id),
            'delete_collection',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, rest.decode_none)

    def get_model_file(self, collection_id, feature, model_format, headers=None):
        """
        Download the model of a collection for on-device use.

        Args:
            collection_id (str):
                The trained collection.
            feature (str):
                Feature of the model, e.g. ``objects``.
            model_format (str):
                Format of the model, e.g. ``rscnn``.

        Returns:
            DetailedResponse:
                With the model file as a ``bytes`` result.
        """
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/model', collection_id),
            'get_model_file',
            headers=headers,
            params=[('feature', feature), ('model_format', model_format)],
            accept='application/octet-stream',
        )
        return self.send(request, rest.decode_bytes)

    #########################
    # Images
    #########################

    def add_images(self, collection_id, images_file=None, image_url=None, training_data=None, headers=None):
        """
        Add images to a collection, optionally with training data.

        Args:
            collection_id (str):
                The collection to add the images to.
            images_file (Union[Sequence[Union[bytes, str, BinaryIO, FileWithMetadata]], None]):
                Images, or .zip files of images, to add.
            image_url (Union[Sequence[str], None]):
                URLs of images to add.
            training_data (Union[str, None]):
                JSON-encoded training data, for a single image only.

        Returns:
            DetailedResponse:
                With an ``ImageDetailsList`` result.
        """
        form = MultipartForm()
        _append_images(form, images_file, image_url)
        if training_data is not None:
            form.append('training_data', training_data)
        if not form:
            raise ValueError('Provide images_file or image_url to add images.')

        request = self.prepare_request(
            'POST',
            encode_path('/v4/collections/{}/images', collection_id),
            'add_images',
            headers=headers,
            form=form,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ImageDetailsList))

    def list_images(self, collection_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/images', collection_id),
            'list_images',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ImageSummaryList))

    def get_image_details(self, collection_id, image_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/images/{}', collection_id, image_id),
            'get_image_details',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ImageDetails))

    def delete_image(self, collection_id, image_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v4/collections/{}/images/{}', collection_id, image_id),
            'delete_image',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, rest.decode_none)

    def get_jpeg_image(self, collection_id, image_id, size=None, headers=None):
        """
        Download an image of a collection as JPEG.

        Args:
            size (Union[str, None]):
                ``full`` or ``thumbnail``.

        Returns:
            DetailedResponse:
                With the image as a ``bytes`` result.
        """
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/images/{}/jpeg', collection_id, image_id),
            'get_jpeg_image',
            headers=headers,
            params=[('size', size)],
            accept='image/jpeg',
        )
        return self.send(request, rest.decode_bytes)

    #########################
    # Objects
    #########################

    def list_object_metadata(self, collection_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/objects', collection_id),
            'list_object_metadata',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ObjectMetadataList))

    def update_object_metadata(self, collection_id, object, new_object, headers=None):
        """Rename an object in the training data of a collection."""
        request = self.prepare_request(
            'POST',
            encode_path('/v4/collections/{}/objects/{}', collection_id, object),
            'update_object_metadata',
            headers=headers,
            json_body={'object': new_object},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.UpdateObjectMetadata))

    def get_object_metadata(self, collection_id, object, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v4/collections/{}/objects/{}', collection_id, object),
            'get_object_metadata',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ObjectMetadata))

    def delete_object(self, collection_id, object, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v4/collections/{}/objects/{}', collection_id, object),
            'delete_object',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, rest.decode_none)

    #########################
    # Training
    #########################

    def train(self, collection_id, headers=None):
        request = self.prepare_request(
            'POST',
            encode_path('/v4/collections/{}/train', collection_id),
            'train',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Collection))

    def add_image_training_data(self, collection_id, image_id, objects=None, headers=None):
        """
        Set the objects labeled in an image, replacing any previous ones.

        Args:
            objects (Union[Sequence[Union[TrainingDataObject, dict]], None]):
                Objects with their locations.

        Returns:
            DetailedResponse:
                With a ``TrainingDataObjects`` result.
        """
        request = self.prepare_request(
            'POST',
            encode_path('/v4/collections/{}/images/{}/training_data', collection_id, image_id),
            'add_image_training_data',
            headers=headers,
            json_body={'objects': objects},
            accept='application/json',
            content_type='application/json',
        )
        return self.send(request, model_decoder(models.TrainingDataObjects))

    def get_training_usage(self, start_time=None, end_time=None, headers=None):
        """
        Get the number of trainings and trained images over a period.

        Args:
            start_time (Union[datetime.date, str, None]):
                Earliest day to include.
            end_time (Union[datetime.date, str, None]):
                Most recent day to include.

        Returns:
            DetailedResponse:
                With a ``TrainingEvents`` result.
        """
        request = self.prepare_request(
            'GET',
            '/v4/training_usage',
            'get_training_usage',
            headers=headers,
            params=[('start_time', format_date(start_time)), ('end_time', format_date(end_time))],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.TrainingEvents))

    #########################
    # User data
    #########################

    def delete_user_data(self, customer_id, headers=None):
        """Delete all data associated with a customer ID."""
        request = self.prepare_request(
            'DELETE',
            '/v4/user_data',
            'delete_user_data',
            headers=headers,
            params=[('customer_id', customer_id)],
            accept='application/json',
        )
        return self.send(request, rest.decode_none)
