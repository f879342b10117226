"""
Helpers for the RIFF/WAVE container format.

See:
http://soundfile.sapp.org/doc/WaveFormat/
http://unusedino.de/ec64/technical/formats/wav.html
"""

import logging

RIFF_HEADER_SIZE = 12
SUBCHUNK_FIELD_SIZE = 4

logger = logging.getLogger(__name__)


def is_wav_file(data):
    """
    Check the "RIFF" chunk descriptor: "ChunkID" must be "RIFF" and
    "Format" must be "WAVE". The "ChunkSize" is not validated.

    Args:
        data (Union[bytes, bytearray]):
            Buffer that may contain a WAV-formatted audio file.

    Returns:
        bool:
            Whether the buffer starts with a RIFF/WAVE header.
    """

    if len(data) < RIFF_HEADER_SIZE:
        return False
    return bytes(data[0:4]) == b'RIFF' and bytes(data[8:12]) == b'WAVE'


def repair_wav_header(data):
    """
    Repair, in place, the size fields of a WAV file streamed by a server
    that could not know the final length of the audio in advance.

    The RIFF chunk size (bytes 4-7) is set to the total length minus 8,
    and the size of the "data" subchunk is set to the number of bytes
    that follow its size field. Subchunks are scanned from offset 12 by
    reading a 4-byte ID and a 4-byte little-endian size repeatedly until
    the "data" ID is found.

    Args:
        data (bytearray):
            The WAV-formatted audio, modified in place.

    Returns:
        bool:
            True if repaired. False if the buffer is not RIFF/WAVE, or is
            truncated or malformed; the buffer is then left unmodified.
    """

    if not is_wav_file(data):
        return False

    # Find data subchunk. Nothing is written until it is found.
    offset = RIFF_HEADER_SIZE
    while True:
        # Need room for the subchunk ID and size fields.
        if offset + 2 * SUBCHUNK_FIELD_SIZE > len(data):
            logger.warning('WAV header repair aborted: no data subchunk within %d bytes.', len(data))
            return False

        subchunk_id = bytes(data[offset:offset + SUBCHUNK_FIELD_SIZE])
        offset += SUBCHUNK_FIELD_SIZE
        if subchunk_id == b'data':
            break

        subchunk_size = int.from_bytes(
            data[offset:offset + SUBCHUNK_FIELD_SIZE],
            byteorder='little',
        )
        offset += SUBCHUNK_FIELD_SIZE
        if offset + subchunk_size > len(data):
            logger.warning(
                "WAV header repair aborted: subchunk %r declares %d bytes past end of buffer.",
                subchunk_id,
                offset + subchunk_size - len(data),
            )
            return False
        offset += subchunk_size

    # Data subchunk size excludes its own ID and size fields.
    data_subchunk_size = len(data) - offset - SUBCHUNK_FIELD_SIZE

    data[4:8] = (len(data) - 8).to_bytes(4, byteorder='little')
    data[offset:offset + SUBCHUNK_FIELD_SIZE] = data_subchunk_size.to_bytes(4, byteorder='little')
    return True


def read_wav_header(wav_header):
    """
    Attempt to extract encoding, sample rate and channels from possible
    WAV header.

    Args:
        wav_header (bytes):
            Possible WAV file header.

    Returns:
        Union[bool, str]:
            False or truthy value, which may be the encoding name.
        int:
            Sample rate if WAV header successfully parsed, else 0.
        int:
            Channel count if WAV header is successfully parsed, else 0.
    """

    if not is_wav_file(wav_header) or len(wav_header) < 28:
        return False, 0, 0

    # Get the encoding type, which is always truthy.
    encoding_bytes = bytes(wav_header[20:22])
    if encoding_bytes == b'\x01\x00':
        wav_encoding = 'pcm_s16le'
    elif encoding_bytes == b'\x03\x00':
        wav_encoding = 'pcm_f32le'
    elif encoding_bytes == b'\x06\x00':
        wav_encoding = 'a-law'
    elif encoding_bytes == b'\x07\x00':
        wav_encoding = 'mu-law'
    else:
        # TODO: handle WAVE_FORMAT_EXTENSIBLE with subformats.
        wav_encoding = True
    # Get number of channels.
    channels = int.from_bytes(wav_header[22:24], byteorder='little')
    # Get the sample rate.
    sample_rate = int.from_bytes(wav_header[24:28], byteorder='little')
    return wav_encoding, sample_rate, channels
