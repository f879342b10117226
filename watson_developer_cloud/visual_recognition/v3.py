"""
Visual Recognition V3: classify images with built-in or custom
classifiers, and keep downloaded Core ML models of custom classifiers in
a local store.
"""

import logging

from watson_developer_cloud.common import rest
from watson_developer_cloud.common.rest import MultipartForm
from watson_developer_cloud.common.rest import model_decoder
from watson_developer_cloud.common.service import FileWithMetadata
from watson_developer_cloud.common.service import WatsonService
from watson_developer_cloud.common.utils import encode_path
from watson_developer_cloud.visual_recognition import models_v3 as models
from watson_developer_cloud.visual_recognition.local_models import LocalModelNotFoundError
from watson_developer_cloud.visual_recognition.local_models import LocalModelStore
from watson_developer_cloud.visual_recognition.local_models import needs_update

DEFAULT_SERVICE_URL = 'https://api.us-south.visual-recognition.watson.cloud.ibm.com'
SERVICE_NAME = 'watson_vision_combined'

logger = logging.getLogger(__name__)


def _as_file(file, filename=None, content_type=None):
    if isinstance(file, FileWithMetadata):
        return file
    return FileWithMetadata(file, filename=filename, content_type=content_type)


class VisualRecognitionV3(WatsonService):
    """
    Client of the Visual Recognition V3 service.

    Args:
        version (str):
            API version date, e.g. ``2018-03-19``.
        authenticator (Union[common.authentication.Authenticator, None]):
            If None, credentials are read from ``WATSON_VISION_COMBINED_*``
            environment variables or the credentials file.
        service_url (str):
            Base URL of the service instance.
        session (Union[requests.Session, None]):
            Session to send requests with.
        local_model_store (Union[LocalModelStore, None]):
            Where downloaded models are kept; the platform's default
            directory if None.
    """

    service_version = 'V3'

    def __init__(
        self,
        version,
        authenticator=None,
        service_url=DEFAULT_SERVICE_URL,
        session=None,
        local_model_store=None,
    ):
        super().__init__(
            SERVICE_NAME,
            service_url=service_url,
            authenticator=authenticator,
            version=version,
            session=session,
        )
        self.local_model_store = local_model_store if local_model_store is not None else LocalModelStore()

    #########################
    # General
    #########################

    def classify(
        self,
        images_file=None,
        images_filename=None,
        images_file_content_type=None,
        url=None,
        threshold=None,
        owners=None,
        classifier_ids=None,
        accept_language=None,
        headers=None,
    ):
        """
        Classify images with built-in or custom classifiers.

        Args:
            images_file (Union[bytes, str, BinaryIO, FileWithMetadata, None]):
                An image, or a .zip file of images, or a path to one.
            images_filename (Union[str, None]):
                Filename reported for ``images_file``.
            images_file_content_type (Union[str, None]):
                MIME type of ``images_file``.
            url (Union[str, None]):
                URL of an image to classify.
            threshold (Union[float, None]):
                Minimum score a class must have to be returned.
            owners (Union[Sequence[str], None]):
                Classifier owners to use: ``IBM``, ``me``, or both.
            classifier_ids (Union[Sequence[str], None]):
                Classifiers to use, e.g. ``['default', 'food']``.
            accept_language (Union[str, None]):
                Language of class names in the response, e.g. ``en``.

        Returns:
            DetailedResponse:
                With a ``ClassifiedImages`` result.
        """
        form = MultipartForm()
        if images_file is not None:
            image = _as_file(images_file, images_filename, images_file_content_type)
            image.append_to(form, 'images_file')
        if url is not None:
            form.append('url', url)
        if threshold is not None:
            form.append('threshold', threshold)
        if owners is not None:
            form.append('owners', ','.join(owners))
        if classifier_ids is not None:
            form.append('classifier_ids', ','.join(classifier_ids))
        if not form:
            raise ValueError('Provide images_file or url, or classifier options to classify with.')

        call_headers = {'Accept-Language': accept_language}
        call_headers.update(headers or dict())
        request = self.prepare_request(
            'POST',
            '/v3/classify',
            'classify',
            headers=call_headers,
            form=form,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.ClassifiedImages))

    #########################
    # Custom classifiers
    #########################

    @staticmethod
    def _append_examples(form, positive_examples, negative_examples, negative_examples_filename):
        for class_name, examples in (positive_examples or dict()).items():
            examples = _as_file(examples, filename=f"{class_name}.zip")
            form.append(
                f"{class_name}_positive_examples",
                examples.read(),
                filename=examples.filename or f"{class_name}.zip",
                content_type='application/octet-stream',
            )
        if negative_examples is not None:
            examples = _as_file(negative_examples, filename=negative_examples_filename)
            form.append(
                'negative_examples',
                examples.read(),
                filename=examples.filename or 'negative_examples.zip',
                content_type='application/octet-stream',
            )

    def create_classifier(
        self,
        name,
        positive_examples,
        negative_examples=None,
        negative_examples_filename=None,
        headers=None,
    ):
        """
        Train a new custom classifier.

        Args:
            name (str):
                Name of the classifier.
            positive_examples (dict[str, Union[bytes, str, BinaryIO, FileWithMetadata]]):
                Class names mapped to .zip files of example images.
            negative_examples (Union[bytes, str, BinaryIO, FileWithMetadata, None]):
                A .zip file of images that do not depict any class.
            negative_examples_filename (Union[str, None]):
                Filename reported for ``negative_examples``.

        Returns:
            DetailedResponse:
                With a ``Classifier`` result.
        """
        if not positive_examples:
            raise ValueError('At least one class of positive examples is required.')
        form = MultipartForm()
        form.append('name', name)
        self._append_examples(form, positive_examples, negative_examples, negative_examples_filename)

        request = self.prepare_request(
            'POST', '/v3/classifiers', 'create_classifier', headers=headers, form=form, accept='application/json',
        )
        return self.send(request, model_decoder(models.Classifier))

    def list_classifiers(self, verbose=None, headers=None):
        request = self.prepare_request(
            'GET',
            '/v3/classifiers',
            'list_classifiers',
            headers=headers,
            params=[('verbose', verbose)],
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Classifiers))

    def get_classifier(self, classifier_id, headers=None):
        request = self.prepare_request(
            'GET',
            encode_path('/v3/classifiers/{}', classifier_id),
            'get_classifier',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Classifier))

    def update_classifier(
        self,
        classifier_id,
        positive_examples=None,
        negative_examples=None,
        negative_examples_filename=None,
        headers=None,
    ):
        """
        Retrain a custom classifier with new examples.

        Returns:
            DetailedResponse:
                With a ``Classifier`` result.
        """
        form = MultipartForm()
        self._append_examples(form, positive_examples, negative_examples, negative_examples_filename)
        if not form:
            raise ValueError('Provide positive_examples or negative_examples to update a classifier.')

        request = self.prepare_request(
            'POST',
            encode_path('/v3/classifiers/{}', classifier_id),
            'update_classifier',
            headers=headers,
            form=form,
            accept='application/json',
        )
        return self.send(request, model_decoder(models.Classifier))

    def delete_classifier(self, classifier_id, headers=None):
        request = self.prepare_request(
            'DELETE',
            encode_path('/v3/classifiers/{}', classifier_id),
            'delete_classifier',
            headers=headers,
            accept='application/json',
        )
        return self.send(request, rest.decode_none)

    #########################
    # Core ML
    #########################

    def get_core_ml_model(self, classifier_id, headers=None):
        """
        Download the Core ML model of a custom classifier.

        Returns:
            DetailedResponse:
                With the model file as a ``bytes`` result.
        """
        request = self.prepare_request(
            'GET',
            encode_path('/v3/classifiers/{}/core_ml_model', classifier_id),
            'get_core_ml_model',
            headers=headers,
            accept='application/octet-stream',
        )
        return self.send(request, rest.decode_bytes)

    #########################
    # Local models
    #########################

    def get_local_model(self, classifier_id):
        """
        Get a model stored locally.

        Returns:
            LocalModel:
                Path and metadata of the model.

        Raises:
            LocalModelNotFoundError:
                No model of the classifier is stored locally.
        """
        return self.local_model_store.load_metadata(classifier_id)

    def update_local_model(self, classifier_id):
        """
        Download the latest model of a classifier, unless the local model
        is already current. A model is only downloaded when the
        classifier is ``ready``, unless dates are missing.

        Returns:
            Union[Classifier, None]:
                The classifier whose model was downloaded, or None if the
                local model is current.
        """
        try:
            local_metadata = self.local_model_store.load_metadata(classifier_id).metadata
        except LocalModelNotFoundError:
            local_metadata = None

        classifier = self.get_classifier(classifier_id).result
        if not needs_update(local_metadata, classifier):
            logger.info("Local model for classifier %s is current.", classifier_id)
            return None

        model_bytes = self.get_core_ml_model(classifier_id).result
        self.local_model_store.save(classifier, model_bytes)
        return classifier

    def list_local_models(self):
        return self.local_model_store.list_models()

    def delete_local_model(self, classifier_id):
        self.local_model_store.delete(classifier_id)

    #########################
    # User data
    #########################

    def delete_user_data(self, customer_id, headers=None):
        """Delete all data associated with a customer ID."""
        request = self.prepare_request(
            'DELETE',
            '/v3/user_data',
            'delete_user_data',
            headers=headers,
            params=[('customer_id', customer_id)],
            accept='application/json',
        )
        return self.send(request, rest.decode_none)
