"""
gedcom_reader: streaming decoder for GEDCOM genealogical documents.

    from gedcom_reader import Decoder, DecodeOptions

    with Decoder.from_path("family.ged", DecodeOptions(allow_unknown_tags=True)) as dec:
        for record in dec:
            print(record.kind, record.xref)
"""

from __future__ import annotations

from gedcom_reader.decoder import Decoder, Phase, decode, decode_file, new_decoder
from gedcom_reader.options import DecodeOptions

__version__ = "0.1.0"

__all__ = [
    "Decoder",
    "DecodeOptions",
    "Phase",
    "decode",
    "decode_file",
    "new_decoder",
]
