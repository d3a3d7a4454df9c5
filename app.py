from flask import Flask, jsonify, request

from sudoku_csp.board import Board, InvalidBoardError
from sudoku_csp.constraints import conflicts, is_valid_placement
from sudoku_csp.generator import DEFAULT_REMOVALS, generate, removals_for
from sudoku_csp.solver import compare, solve
from sudoku_csp.strategies import Status, Strategy


def _result_json(result, events=None):
    payload = {
        'solved': result.status is Status.SOLVED,
        'grid': result.board.grid() if result.status is Status.SOLVED else None,
        'steps': result.steps,
        'time_ms': round(result.elapsed_ms, 3),
    }
    if events is not None:
        payload['events'] = events
    return payload


def _event_json(event):
    return {'row': event.row, 'col': event.col, 'value': event.value, 'kind': event.kind.value}


def _puzzle_from(data):
    if not isinstance(data, dict) or 'puzzle' not in data:
        raise InvalidBoardError("request body must be a JSON object with a 'puzzle' grid")
    return Board.from_grid(data['puzzle'])


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        DEFAULT_REMOVALS=DEFAULT_REMOVALS,
        INCLUDE_STEPS=False,
        MAX_REPORTED_STEPS=1000,
    )
    app.config.from_prefixed_env("SUDOKU")
    if test_config is not None:
        app.config.from_mapping(test_config)

    # Collects step events per strategy up to the configured limit, or None
    # when the client did not ask for them.
    def step_recorder(wanted):
        if not wanted:
            return None, None
        limit = app.config['MAX_REPORTED_STEPS']
        recorded = {strategy: [] for strategy in Strategy}

        def on_step(strategy, event):
            if len(recorded[strategy]) < limit:
                recorded[strategy].append(_event_json(event))

        return recorded, on_step

    @app.errorhandler(ValueError)
    def bad_request(error):
        app.logger.info("Rejected request: %s", error)
        return jsonify({'error': str(error)}), 400

    @app.route('/solve', methods=['POST'])
    def solve_puzzle():
        data = request.get_json(silent=True)
        board = _puzzle_from(data)
        wanted = data.get('steps', app.config['INCLUDE_STEPS'])
        recorded, on_step = step_recorder(wanted)

        if data.get('strategy'):
            strategy = Strategy(data['strategy'])
            callback = (lambda event: on_step(strategy, event)) if on_step else None
            result = solve(board, strategy, on_step=callback)
            return jsonify({
                'strategy': strategy.value,
                **_result_json(result, recorded[strategy] if recorded else None),
            })

        # Solve using both strategies and report how they compare
        results = compare(board, on_step=on_step)
        response = {
            strategy.value: _result_json(result, recorded[strategy] if recorded else None)
            for strategy, result in results.items()
        }

        basic = results[Strategy.BASIC]
        optimized = results[Strategy.OPTIMIZED]
        if basic.status is Status.SOLVED and optimized.status is Status.SOLVED:
            if optimized.elapsed_ms > 0:
                response['speedup'] = round(basic.elapsed_ms / optimized.elapsed_ms, 1)
            if basic.steps:
                response['step_reduction'] = round((basic.steps - optimized.steps) / basic.steps * 100, 1)

        app.logger.info("Compared strategies: basic %d steps, optimized %d steps", basic.steps, optimized.steps)
        return jsonify(response)

    @app.route('/generate', methods=['GET'])
    def generate_puzzle():
        difficulty = request.args.get('difficulty')
        if difficulty:
            removals = removals_for(difficulty)
        else:
            removals = request.args.get('removals', app.config['DEFAULT_REMOVALS'], type=int)
        seed = request.args.get('seed', type=int)

        puzzle = generate(removals, seed=seed)
        return jsonify({'puzzle': puzzle.grid(), 'removals': removals})

    @app.route('/validate', methods=['POST'])
    def validate_puzzle():
        data = request.get_json(silent=True)
        board = _puzzle_from(data)
        response = {
            'conflicts': sorted([row, col] for row, col in conflicts(board)),
        }
        response['valid'] = not response['conflicts']

        if all(key in data for key in ('row', 'col', 'value')):
            try:
                row, col, value = (int(data[key]) for key in ('row', 'col', 'value'))
            except (TypeError, ValueError, OverflowError):
                raise ValueError("row, col and value must be integers") from None
            if not (0 <= row < 9 and 0 <= col < 9 and 1 <= value <= 9):
                raise ValueError("row and col must be in 0-8 and value in 1-9")
            response['valid_placement'] = is_valid_placement(board, row, col, value)

        return jsonify(response)

    return app


app = create_app()

if __name__ == '__main__':
    app.run(debug=True)
