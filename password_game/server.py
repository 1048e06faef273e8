"""
HTTP API for the password game.

Stateless: the client sends back the visible ids it got from the previous call.

Run: python -m password_game.server
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from password_game.config_loader import get_config_value, get_game_settings, get_log_level
from password_game.reveal_engine import build_result, settle, update
from password_game.rules import RuleSet, get_rule_set
from password_game.schemas import DisplayOrder

logger = logging.getLogger(__name__)

app = FastAPI(title="Password Game", version="0.1.0")


class UpdateRequest(BaseModel):
    password: str = ""
    visible_ids: List[int] = Field(default_factory=list)
    rule_set: Optional[str] = None
    order: Optional[DisplayOrder] = None
    settle: Optional[bool] = None


def _lookup_rule_set(name: str) -> RuleSet:
    try:
        return get_rule_set(name)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=e.args[0])


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/rules")
def api_rules(rule_set: Optional[str] = None):
    """List the rules of a rule set, without their validators."""
    name = rule_set or get_game_settings().rule_set
    rules = _lookup_rule_set(name)
    return {
        "rule_set": rules.name,
        "rules": [r.model_dump(exclude={"validator"}) for r in rules],
    }


@app.post("/api/update")
def api_update(req: UpdateRequest):
    """Apply one input change. Returns visible rules split by validity."""
    settings = get_game_settings()
    rules = _lookup_rule_set(req.rule_set or settings.rule_set)
    should_settle = settings.settle if req.settle is None else req.settle
    order = req.order or settings.display_order

    step = settle if should_settle else update
    visible = step(req.password, req.visible_ids, rules)
    result = build_result(req.password, visible, rules)
    logger.debug("Visible rules %s -> %s (%s)", req.visible_ids, visible, rules.name)
    return {
        "rule_set": rules.name,
        "visible_ids": result.visible_ids,
        "rules": [s.model_dump() for s in result.ordered(order)],
        "failing": [s.model_dump() for s in result.failing],
        "passing": [s.model_dump() for s in result.passing],
        "length": result.length,
        "total_rules": result.total_rules,
        "complete": result.complete,
    }


def main():
    import uvicorn
    logging.basicConfig(level=get_log_level())
    host = get_config_value("server.host", "127.0.0.1")
    port = int(get_config_value("server.port", 8765))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
