"""
Local storage of Visual Recognition models downloaded for on-device use.

Each model is stored as ``<classifier_id>.mlmodel``, next to a
``<classifier_id>.json`` file with metadata of the classifier it was
downloaded from. The metadata determines whether a newer model should be
downloaded.
"""

import datetime
import json
import logging
import os
import shutil
import sys
import tempfile

from watson_developer_cloud.common import config
from watson_developer_cloud.common import rest
from watson_developer_cloud.visual_recognition.models_v3 import LocalModelMetadata

MODEL_EXTENSION = '.mlmodel'
METADATA_EXTENSION = '.json'

logger = logging.getLogger(__name__)


class LocalModelNotFoundError(rest.WatsonError):
    pass


def default_model_directory():
    """
    Get the platform's directory for application data.

    Returns:
        str:
            ``WATSON_LOCAL_MODEL_DIR`` if set; else
            ``~/Library/Application Support/watson-developer-cloud`` on
            macOS, ``%APPDATA%\\watson-developer-cloud`` on Windows, or
            ``$XDG_DATA_HOME/watson-developer-cloud`` (by default under
            ``~/.local/share``) elsewhere.
    """

    if config.LOCAL_MODEL_DIRECTORY:
        return os.path.abspath(os.path.expanduser(config.LOCAL_MODEL_DIRECTORY))

    if sys.platform == 'darwin':
        base = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support')
    elif sys.platform.startswith('win'):
        base = os.getenv('APPDATA') or os.path.join(os.path.expanduser('~'), 'AppData', 'Roaming')
    else:
        base = os.getenv('XDG_DATA_HOME') or os.path.join(os.path.expanduser('~'), '.local', 'share')
    return os.path.join(base, config.APPLICATION_DIRECTORY_NAME)


def model_date(metadata):
    """Last retraining time, else creation time, else None."""
    if metadata is None:
        return None
    return metadata.retrained or metadata.created


def needs_update(local_metadata, classifier):
    """
    Decide whether to download the model of a classifier.

    Args:
        local_metadata (Union[LocalModelMetadata, None]):
            Metadata of the local model, or None if there is none.
        classifier (Classifier):
            The classifier as currently reported by the service.

    Returns:
        bool:
            True if there is no local model, or either date is unknown,
            or the classifier is ready and newer than the local model.
    """

    local_date = model_date(local_metadata)
    if local_date is None:
        return True
    classifier_date = model_date(classifier)
    if classifier_date is None:
        return True
    return classifier_date > local_date and classifier.status == 'ready'


class LocalModel:
    """
    A model found on the local filesystem.

    Attributes:
        path (str):
            Path of the ``.mlmodel`` file.
        metadata (LocalModelMetadata):
            Metadata of the classifier it was downloaded from.
    """

    def __init__(self, path, metadata):
        self.path = path
        self.metadata = metadata

    @property
    def classifier_id(self):
        return self.metadata.classifier_id

    def __repr__(self):
        return f"LocalModel(path={self.path!r}, classifier_id={self.classifier_id!r})"


class LocalModelStore:
    """
    Directory of downloaded models, with optional read-only search paths
    of bundled models.

    Args:
        directory (Union[str, None]):
            Writable directory; ``default_model_directory()`` if None.
        search_paths (Union[Sequence[str], None]):
            Additional read-only directories, searched after
            ``directory``.
    """

    def __init__(self, directory=None, search_paths=None):
        self.directory = directory if directory is not None else default_model_directory()
        self.search_paths = list(search_paths or [])

    @staticmethod
    def _check_classifier_id(classifier_id):
        if not classifier_id or os.sep in classifier_id or '/' in classifier_id \
                or classifier_id in (os.curdir, os.pardir):
            raise ValueError(f"Invalid classifier ID for a local model: '{classifier_id}'.")

    def _model_path(self, directory, classifier_id):
        return os.path.join(directory, classifier_id + MODEL_EXTENSION)

    def _metadata_path(self, directory, classifier_id):
        return os.path.join(directory, classifier_id + METADATA_EXTENSION)

    def locate(self, classifier_id):
        """
        Find the model file of a classifier: in the writable directory
        first, then in the search paths.

        Returns:
            str:
                Path of the model file.

        Raises:
            LocalModelNotFoundError:
                No model of the classifier is stored locally.
        """
        self._check_classifier_id(classifier_id)
        for directory in [self.directory] + self.search_paths:
            path = self._model_path(directory, classifier_id)
            if os.path.isfile(path):
                return path
        raise LocalModelNotFoundError(f"Failed to locate a local model for classifier {classifier_id}.")

    def load_metadata(self, classifier_id):
        """
        Read the metadata stored next to a classifier's model. A model
        without a metadata file gets metadata with no dates, so it is
        considered out of date.

        Returns:
            LocalModel

        Raises:
            LocalModelNotFoundError:
                No model of the classifier is stored locally.
            WatsonSerializationError:
                The metadata file is not valid.
        """
        model_path = self.locate(classifier_id)
        metadata_path = self._metadata_path(os.path.dirname(model_path), classifier_id)
        if not os.path.isfile(metadata_path):
            logger.warning("Local model %s has no metadata file %s.", classifier_id, metadata_path)
            return LocalModel(model_path, LocalModelMetadata(classifier_id=classifier_id))

        with open(metadata_path, 'r', encoding='utf-8') as fin:
            try:
                metadata_dict = json.load(fin)
            except ValueError as e:
                raise rest.WatsonSerializationError(f"Invalid local model metadata in {metadata_path}.") from e
        return LocalModel(model_path, rest.model_from_dict(LocalModelMetadata, metadata_dict))

    def save(self, classifier, model_bytes):
        """
        Store a downloaded model with the metadata of its classifier.
        Files are written to a temporary directory, then atomically
        moved into place.

        Args:
            classifier (Classifier):
                The classifier the model was downloaded from.
            model_bytes (bytes):
                Content of the model file.

        Returns:
            LocalModel:
                The stored model.
        """
        classifier_id = classifier.classifier_id
        self._check_classifier_id(classifier_id)

        metadata_kwargs = {
            'classifier_id': classifier_id,
            'name': classifier.name,
            'status': classifier.status,
            'created': classifier.created,
            'retrained': classifier.retrained,
            'downloaded': datetime.datetime.now(datetime.timezone.utc),
        }
        metadata = LocalModelMetadata(**{k: v for k, v in metadata_kwargs.items() if v is not None})

        os.makedirs(self.directory, exist_ok=True)
        # Same filesystem as the destination, so that os.replace() is atomic.
        temp_directory = tempfile.mkdtemp(prefix='.download-', dir=self.directory)
        try:
            temp_model_path = self._model_path(temp_directory, classifier_id)
            temp_metadata_path = self._metadata_path(temp_directory, classifier_id)
            with open(temp_model_path, 'wb') as fout:
                fout.write(model_bytes)
            with open(temp_metadata_path, 'w', encoding='utf-8') as fout:
                json.dump(rest.model_to_dict(metadata), fout, indent=2)

            model_path = self._model_path(self.directory, classifier_id)
            os.replace(temp_model_path, model_path)
            os.replace(temp_metadata_path, self._metadata_path(self.directory, classifier_id))
        finally:
            shutil.rmtree(temp_directory, ignore_errors=True)

        logger.info("Stored local model for classifier %s at %s.", classifier_id, model_path)
        return LocalModel(model_path, metadata)

    def list_models(self):
        """
        Returns:
            list[str]:
                Sorted IDs of classifiers with a local model, in the
                writable directory or in any search path.
        """
        classifier_ids = set()
        for directory in [self.directory] + self.search_paths:
            if not os.path.isdir(directory):
                continue
            for filename in os.listdir(directory):
                if filename.endswith(MODEL_EXTENSION):
                    classifier_ids.add(filename[:-len(MODEL_EXTENSION)])
        return sorted(classifier_ids)

    def delete(self, classifier_id):
        """
        Delete a model and its metadata from the writable directory.
        Models in the search paths are never deleted.

        Raises:
            LocalModelNotFoundError:
                The writable directory has no model of the classifier.
        """
        self._check_classifier_id(classifier_id)
        model_path = self._model_path(self.directory, classifier_id)
        if not os.path.isfile(model_path):
            raise LocalModelNotFoundError(f"No deletable local model for classifier {classifier_id}.")
        os.remove(model_path)
        metadata_path = self._metadata_path(self.directory, classifier_id)
        if os.path.isfile(metadata_path):
            os.remove(metadata_path)
        logger.info("Deleted local model for classifier %s.", classifier_id)
