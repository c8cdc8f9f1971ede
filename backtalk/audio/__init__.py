"""Audio decoding, reversal and encoding."""

from .decoder import AudioDecoder, DecoderBackend, WavDecoderBackend, decode
from .normalizer import normalize_peak
from .reverser import reverse
from .wav_encoder import encode, encode_blob

__all__ = [
    'AudioDecoder',
    'DecoderBackend',
    'WavDecoderBackend',
    'decode',
    'normalize_peak',
    'reverse',
    'encode',
    'encode_blob',
]
