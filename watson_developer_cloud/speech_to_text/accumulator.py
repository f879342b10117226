"""
Merge the incremental results of a streaming recognition request.
"""


class SpeechRecognitionResultsAccumulator:
    """
    Accumulates ``SpeechRecognitionResults`` messages, each of which holds
    results starting at its ``result_index``. Interim results are replaced
    by later results with the same index.

    Attributes:
        results (list[SpeechRecognitionResult]):
            Latest result of each utterance, in order.
        speaker_labels (list[SpeakerLabelsResult]):
            All speaker labels received, in order.
    """

    def __init__(self):
        self.results = []
        self.speaker_labels = []

    def add(self, results):
        """
        Args:
            results (SpeechRecognitionResults):
                A results message from the service.
        """
        for offset, result in enumerate(results.results):
            index = results.result_index + offset
            if index < len(self.results):
                self.results[index] = result
            else:
                self.results.append(result)
        self.speaker_labels.extend(results.speaker_labels)

    @property
    def best_transcript(self):
        """Best transcript of each utterance, joined with single spaces."""
        transcripts = [result.alternatives[0].transcript.strip() for result in self.results if result.alternatives]
        return ' '.join(transcript for transcript in transcripts if transcript)

    def __len__(self):
        return len(self.results)
