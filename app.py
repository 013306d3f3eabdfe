#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR SVG - Flask Web Application
"""

import logging
from io import BytesIO
from typing import Tuple

import segno
from flask import Flask, jsonify, request, send_file

from qrsvg import (
    QRSvgError,
    SvgSettings,
    create,
    make_qr,
    matrix_from_symbol,
    settings_from_mapping,
    to_base64,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SVG_MIMETYPE = 'image/svg+xml'


def _read_params(req) -> Tuple[str, str, str, str, bool, int]:
    """Extract QR generation parameters from a Flask request."""
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or "M").strip().upper()
    version = req.values.get('version') or "auto"
    mode = (req.values.get('mode') or "").strip().lower() or None
    micro = (req.values.get('micro') == 'true')

    try:
        border = int(req.values.get('border') or 4)
        if border < 0 or border > 20:
            border = 4
    except (ValueError, TypeError):
        border = 4

    return text, ecc, version, mode, micro, border


def _matrix_and_settings(req) -> Tuple[list, SvgSettings]:
    text, ecc, version, mode, micro, border = _read_params(req)
    settings = settings_from_mapping(req.values)
    logger.info(f"Generating QR code with parameters: ecc={ecc}, version={version}, mode={mode}")
    try:
        qr = make_qr(text, ecc=ecc, version=version, mode=mode, micro=micro)
    except segno.DataOverflowError:
        raise
    except ValueError as ex:
        raise QRSvgError(f"Invalid QR parameters: {ex}") from ex
    logger.info(f"Successfully generated QR code version {qr.designator}")
    return matrix_from_symbol(qr, border=border), settings


app = Flask(__name__)


@app.errorhandler(QRSvgError)
def _invalid_settings(ex):
    logger.warning(f"Rejected render parameters: {ex}")
    return str(ex), 400


@app.errorhandler(segno.DataOverflowError)
def _data_overflow(ex):
    logger.warning(f"QR generation failed: {ex}")
    return f"Data does not fit the requested symbol: {ex}", 400


@app.route('/svg', methods=['GET'])
def svg_inline():
    if not request.values.get('text', '').strip():
        return "Missing text", 400
    matrix, settings = _matrix_and_settings(request)
    return app.response_class(create(matrix, settings), mimetype=SVG_MIMETYPE)


@app.route('/svg/base64', methods=['GET'])
def svg_base64():
    if not request.values.get('text', '').strip():
        return "Missing text", 400
    matrix, settings = _matrix_and_settings(request)
    encoded = to_base64(matrix, settings)
    return jsonify(base64=encoded, data_uri=f"data:{SVG_MIMETYPE};base64,{encoded}")


@app.route('/export/svg', methods=['GET'])
def export_svg():
    if not request.values.get('text', '').strip():
        return "Missing text", 400
    matrix, settings = _matrix_and_settings(request)
    buf = BytesIO(create(matrix, settings).encode('utf-8'))
    return send_file(buf, as_attachment=True, download_name='qr.svg', mimetype=SVG_MIMETYPE)


if __name__ == "__main__":
    app.run(debug=False)
