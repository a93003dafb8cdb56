import logging

from flask import Flask, request, jsonify

import config
from distance_matrix import geodesic_matrix
from errors import Infeasible, TSPError
from heldKarp import held_karp
from path_manager import PathManager

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

app=Flask(__name__)


def _error_status(exc):
    # a well-formed matrix with no cycle is unprocessable, everything else is a bad request
    return 422 if isinstance(exc, Infeasible) else 400


@app.route("/health")
def health():
    return jsonify({"status": "ok", "max_locations": config.MAX_LOCATIONS})

@app.route("/solve", methods=["POST"])
def solve():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    matrix = data.get("matrix")
    start = data.get("start", 1)
    if matrix is None:
        return jsonify({"error": "Missing cost matrix"}), 400
    try:
        cost, route = held_karp(matrix, start)
    except TSPError as e:
        app.logger.info("solve rejected: %s", e)
        return jsonify({"error": type(e).__name__, "details": str(e)}), _error_status(e)
    return jsonify({
        "path": route,
        "cost": cost,
        "distance": round(cost, config.DISTANCE_PRECISION)
    })

@app.route('/calculate-path', methods=["POST"])
def calculate_path():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    ldmrk_selected = data.get("landmarks", [])
    user_loc = data.get("user_location")
    if not ldmrk_selected or not user_loc:
        return jsonify({"error": "Missing landmark or user location"}), 400
    if not isinstance(ldmrk_selected, list) or not isinstance(user_loc, dict):
        return jsonify({"error": "landmarks must be a list and user_location an object"}), 400
    if not all(isinstance(lm, dict) for lm in ldmrk_selected):
        return jsonify({"error": "Each landmark must be an object"}), 400
    start = {
        "Landmark": "user_start",
        "Latitude": user_loc.get("Latitude"),
        "Longitude": user_loc.get("Longitude")
    }
    nodes = [start] + ldmrk_selected
    try:
        dist_matrix = geodesic_matrix(nodes)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"error": "Invalid landmark coordinates", "details": str(e)}), 400
    pm = PathManager(dist_matrix, nodes)
    try:
        cost, route = pm.compute_optimal_path()
    except TSPError as e:
        app.logger.info("calculate-path rejected: %s", e)
        return jsonify({"error": type(e).__name__, "details": str(e)}), _error_status(e)

    tsp_ordered_nodes = [nodes[i - 1] for i in route]
    segments = [
        {
            "from": seg["start"].get("Landmark"),
            "to": seg["end"].get("Landmark"),
            "distance_m": round(seg["distance"], config.DISTANCE_PRECISION),
            "order": list(seg["order"])
        }
        for seg in pm.segments()
    ]
    return jsonify({
        "path": [n.get("Landmark") for n in tsp_ordered_nodes],
        "result_path": tsp_ordered_nodes,
        "distance": round(cost, config.DISTANCE_PRECISION),
        "segments": segments
    })


if __name__=='__main__':
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
