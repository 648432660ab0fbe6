import random
from typing import Optional

from flask import Flask, Response, request, jsonify, abort

from loot.pile import Loot, LootPile
from mapgen.diagnostics import DiagnosticLog, log_diagnostic
from mapgen.dungeon import Dungeon, DEFAULT_NAME
from mapgen.grid import Grid
from mapgen.params import DEFAULTS

# ============================================================
# Shared state
# ============================================================

app = Flask(__name__)
loot_pile = LootPile()


class _Recorder(DiagnosticLog):
    """Keeps diagnostics for the response body and still logs them."""

    def __call__(self, diag):
        super().__call__(diag)
        log_diagnostic(diag)


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def _dungeon_from_query(diags) -> Dungeon:
    args = request.args
    seed = args.get("seed", type=int)
    return Dungeon.build(
        args.get("width", DEFAULTS.width, type=int),
        args.get("height", DEFAULTS.height, type=int),
        args.get("tile_types", DEFAULTS.tile_types, type=int),
        args.get("entrance_max", DEFAULTS.entrance_max, type=int),
        args.get("exit_max", DEFAULTS.exit_max, type=int),
        args.get("name", DEFAULT_NAME),
        rng=_rng(seed),
        on_diagnostic=diags,
    )


# ============================================================
# Dungeon routes
# ============================================================

@app.route("/dungeon")
def dungeon_json():
    diags = _Recorder()
    d = _dungeon_from_query(diags)
    return jsonify(ok=True, diagnostics=[x.to_dict() for x in diags.events], **d.to_dict())


@app.route("/dungeon/text")
def dungeon_text():
    d = _dungeon_from_query(_Recorder())
    return Response(str(d), mimetype="text/plain")


@app.route("/dungeon/validate", methods=["POST"])
def dungeon_validate():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    rows = body.get("grid")
    if not isinstance(rows, list):
        return jsonify(ok=False, error="Missing param: grid"), 400
    try:
        grid = Grid.from_rows(rows)
    except (TypeError, ValueError, OverflowError) as e:
        return jsonify(ok=False, error=str(e)), 400

    seed = body.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify(ok=False, error="Invalid param: seed must be an integer"), 400

    diags = _Recorder()
    d = Dungeon.from_grid(grid, body.get("name", DEFAULT_NAME), rng=_rng(seed), on_diagnostic=diags)
    return jsonify(
        ok=True,
        accepted=d.grid is grid,
        diagnostics=[x.to_dict() for x in diags.events],
        **d.to_dict(),
    )


# ============================================================
# Loot routes
# ============================================================

def _loot_from(data) -> Loot:
    if not isinstance(data, dict):
        abort(400)
    try:
        return Loot.from_dict(data)
    except (TypeError, ValueError, OverflowError):
        abort(400)


@app.route("/loot", methods=["GET"])
def loot_list():
    return jsonify(ok=True, loot=[x.to_dict() for x in loot_pile.all_loot()])


@app.route("/loot", methods=["POST"])
def loot_add():
    new = _loot_from(request.get_json(silent=True))
    if not loot_pile.add(new):
        return jsonify(ok=False, error="Post failure"), 404
    return jsonify(ok=True, loot=new.to_dict()), 201


@app.route("/loot", methods=["PUT"])
def loot_change():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    old = _loot_from(body.get("old"))
    new = _loot_from(body.get("new"))
    if not loot_pile.change(old, new):
        return jsonify(ok=False, error="Put failure"), 404
    return jsonify(ok=True, loot=new.to_dict())


@app.route("/loot", methods=["DELETE"])
def loot_remove():
    old = _loot_from(request.get_json(silent=True))
    if not loot_pile.remove(old):
        return jsonify(ok=False, error="Delete failure"), 404
    return jsonify(ok=True)


if __name__ == "__main__":
    app.run(debug=True, use_reloader=False, port=5002)
