"""
AWS Lambda entry point for the training compensation calculator.

Serves the same routes as main.py behind API Gateway.
"""

import base64
import json
import logging
import os

from compensation_engine import CompensationEngine

logger = logging.getLogger()
logger.setLevel(logging.INFO)

ENVIRONMENT = os.environ.get("ENVIRONMENT", "dev")

# Stateless, so one instance serves every warm invocation
engine = CompensationEngine()

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def _respond(status_code, payload):
    return {"statusCode": status_code, "headers": CORS_HEADERS, "body": json.dumps(payload)}


def lambda_handler(event, context):
    """Route an API Gateway event (REST or HTTP API v2 format)."""
    http_method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    if http_method == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    path = event.get("path") or event.get("rawPath", "")

    if path == "/calculate" and http_method == "POST":
        return handle_calculate(event)
    if path == "/health" and http_method == "GET":
        return _respond(200, {"status": "healthy", "environment": ENVIRONMENT})
    if path == "/api" and http_method == "GET":
        return _respond(200, {
            "status": "ok",
            "message": "Training Compensation Calculator API",
            "version": "1.0",
            "environment": ENVIRONMENT,
            "runtime": "AWS Lambda",
            "endpoints": {"calculate": "/calculate [POST]", "health": "/health [GET]"},
        })
    return _respond(404, {"error": "Not found", "path": path})


def _parse_body(event):
    body = event.get("body", "")
    if not isinstance(body, str):
        return body
    if not body:
        return None
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


def handle_calculate(event):
    """Price a transfer scenario for all four receiving league tiers."""
    try:
        input_data = _parse_body(event)
    except ValueError as e:
        # Covers malformed JSON and bad base64
        logger.error(f"Body parse error: {str(e)}")
        return _respond(400, {"error": f"Invalid JSON: {str(e)}", "status": "failed"})

    if not input_data:
        return _respond(400, {"error": "No input data provided", "status": "failed"})

    player_name = (input_data.get("player") or {}).get("player_name") or "Unknown"
    logger.info(f"Calculating compensation for: {player_name}")

    try:
        result = engine.compute_from_dict(input_data)
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Rejected scenario for {player_name}: {str(e)}")
        return _respond(400, {"error": f"Validation error: {str(e)}", "status": "validation_failed"})
    except Exception as e:
        # Details stay in the log; the caller only sees a generic message
        logger.error(f"Unexpected error for {player_name}: {str(e)}", exc_info=True)
        return _respond(500, {"error": "An unexpected error occurred during processing", "status": "failed"})

    logger.info(f"Compensation calculated for: {player_name}")
    return _respond(200, result)
