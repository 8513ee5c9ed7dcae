import os
from functools import partial

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse, Response
from slack_bolt import App
from slack_bolt.adapter.fastapi import SlackRequestHandler

from pullsbot.logger import logger
from pullsbot.config import load_github_settings, validate_environment_variables
from pullsbot.db import get_teams_collection
from pullsbot.github_client import fetch_org_issues
from pullsbot.slack_handlers import handle_mention_text
from pullsbot.store import MongoBrain
from pullsbot.utils import is_slack_retry

# Validate environment variables at startup
validate_environment_variables()

brain = MongoBrain(get_teams_collection())
github_settings = load_github_settings()

# Slack app setup. Bolt acknowledges events before running listeners,
# so a slow GitHub call does not hold up the ACK Slack expects within 3 seconds.
slack_app = App(
    token=os.environ["SLACK_BOT_TOKEN"],
    signing_secret=os.environ["SLACK_SIGNING_SECRET"],
)

fastapi_app = FastAPI()
handler = SlackRequestHandler(slack_app)


# Main event handler
@slack_app.event("app_mention")
def handle_mention(event, say):
    handle_mention_text(
        event.get("text", "") or "",
        event.get("user", ""),
        brain,
        partial(fetch_org_issues, github_settings),
        say,
    )


@fastapi_app.post("/slack/events")
async def slack_events(request: Request):
    # Redeliveries of an event already being handled would repeat the command
    if is_slack_retry(request.headers):
        logger.info("Skipping Slack retry #%s", request.headers.get("x-slack-retry-num"))
        return Response(status_code=200)

    try:
        data = await request.json()
    except Exception:
        raise HTTPException(status_code=400, detail="No JSON received")

    logger.debug("Slack event received: type=%s", data.get("type"))

    # Delegate to Slack Bolt FastAPI handler
    return await handler.handle(request)


@fastapi_app.get("/")
async def ping():
    return JSONResponse({"status": "ok"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:fastapi_app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 3000)),
        reload=os.getenv("ENV") != "prod",
    )
