from flask import current_app, jsonify, request
from PIL import Image
import base64
import io
import cv2

from water_pouring.main import main_bp
from water_pouring.main.solver import SolverConfig, InvalidPuzzleError, solve_puzzle
from water_pouring.main.solver.solver_visualizer import SolutionVisualizer
from water_pouring.main.solver.utils import solution_to_dict


def _bounded(data, key, config_key):
    """Request bound clamped to the app's configured cap (None = uncapped)."""
    cap = current_app.config[config_key]
    value = data.get(key)
    if value is None:
        return cap
    if cap is not None and value > cap:
        return cap
    return value


def _solve_from_request():
    """
    Parse the JSON body and run the solver.

    Request body (JSON):
    {
        "capacities": [5, 3],
        "target": [4, 0],
        "initial": [0, 0] (optional, default: all empty),
        "max_depth": int (optional, capped at SOLVER_MAX_DEPTH),
        "max_states": int (optional, capped at SOLVER_MAX_STATES)
    }

    Raises:
        InvalidPuzzleError: Invalid request (mapped to 400)
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidPuzzleError('request body must be a JSON object')

    capacities = data.get('capacities')
    target = data.get('target')
    initial = data.get('initial')

    if not isinstance(capacities, list) or not isinstance(target, list):
        raise InvalidPuzzleError('"capacities" and "target" must be lists')
    if initial is not None and not isinstance(initial, list):
        raise InvalidPuzzleError('"initial" must be a list')

    config = SolverConfig(
        max_depth=_bounded(data, 'max_depth', 'SOLVER_MAX_DEPTH'),
        max_states=_bounded(data, 'max_states', 'SOLVER_MAX_STATES')
    )

    return solve_puzzle(capacities, target, initial, config)


@main_bp.route('/api/health')
def health():
    return jsonify({'status': 'ok'})


@main_bp.route('/api/solve', methods=['POST'])
def solve():
    """
    Solve a pouring puzzle.

    Returns:
    {
        "success": true,
        "status": "SOLVED" | "NO_SOLUTION" | "LIMIT_REACHED",
        "moves": [{"type": "fill", "to": 0}, ...] or null,
        "states": [[{"capacity": 5, "current": 0}, ...], ...],
        "stats": {"levels": 7, "nodes_expanded": .., "states_visited": ..}
    }
    """
    try:
        solution = _solve_from_request()
    except (ValueError, TypeError) as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'success': True, **solution_to_dict(solution)})


@main_bp.route('/api/render', methods=['POST'])
def render():
    """
    Solve a pouring puzzle and render the state trace.

    Returns:
    {
        "success": true,
        "status": "SOLVED",
        "image": "base64 PNG..."
    }
    """
    try:
        solution = _solve_from_request()
    except (ValueError, TypeError) as e:
        return jsonify({'error': str(e)}), 400

    img = SolutionVisualizer().render_solution(solution)

    buffer = io.BytesIO()
    Image.fromarray(cv2.cvtColor(img, cv2.COLOR_BGR2RGB)).save(buffer, format='PNG')

    return jsonify({
        'success': True,
        'status': solution.status.value,
        'image': base64.b64encode(buffer.getvalue()).decode('utf-8')
    })
