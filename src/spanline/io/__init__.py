from spanline.io.json import load_beam, save_beam
from spanline.io.csv import export_beam_response, export_response_curve

__all__ = [
    "save_beam",
    "load_beam",
    "export_response_curve",
    "export_beam_response",
]
