from flask import Flask, request, jsonify
from flask_cors import CORS
from compensation_engine import CompensationEngine
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes
CORS(app)

# Initialize the compensation engine
engine = CompensationEngine()


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Training Compensation Calculator API",
        "version": "1.0",
        "endpoints": {
            "calculate": "/calculate [POST]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/calculate", methods=["POST"])
def calculate():
    """
    Compute training compensation for every receiving league tier
    """
    try:
        # Get input data
        input_data = request.get_json(force=True, silent=True)

        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        # Log request
        player_name = (input_data.get('player') or {}).get('player_name') or 'Unknown'
        logger.info(f"Calculating compensation for: {player_name}")

        # Process through engine
        result = engine.compute_from_dict(input_data)

        logger.info(f"Compensation calculated successfully: {player_name}")

        return jsonify(result), 200

    except (ValueError, KeyError, TypeError) as e:
        # Validation errors (missing fields, unknown enum values, etc.)
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": f"Validation error: {str(e)}",
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
