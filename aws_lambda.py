#!/usr/bin/env python3
"""
AWS Lambda entry point for the Trip Helper Telegram bot.

Telegram delivers updates to an API Gateway webhook, which invokes
lambda_handler. Each update is routed to the `/trip` command resolver.

Required Environment Variables:
    - TELEGRAM_BOT_TOKEN: Telegram bot token
    - OPENAI_API_KEY: OpenAI API key (used by /trip info)
    - OPENAI_MODEL: OpenAI model (optional, defaults to gpt-3.5-turbo)
    - DB_HOST, DB_NAME, DB_USER, DB_PASSWORD: PostgreSQL connection
    - DB_PORT: PostgreSQL port (optional, defaults to 5432)
"""

import asyncio
import json
import logging
import sys
import traceback
from typing import Any, Dict

from trip_helper.bot.router import process_update
from trip_helper.config import config
from trip_helper.services.telegram_client import send_message

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    stream=sys.stdout,
    force=True,
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _is_api_gateway_event(event: Dict[str, Any]) -> bool:
    """
    Check if the event is from API Gateway.

    Args:
        event: Lambda event object

    Returns:
        True if event is from API Gateway, False otherwise
    """
    return (
        "httpMethod" in event or
        "requestContext" in event or
        ("path" in event and "body" in event)
    )


def handle_webhook_update(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Handle webhook update from API Gateway.

    Args:
        event: API Gateway event object

    Returns:
        API Gateway response dictionary
    """
    try:
        config.validate()

        # API Gateway sends the body as a JSON string; custom setups may nest it
        body = event.get("body") or event.get("requestContext", {}).get("body", "{}")
        if isinstance(body, str):
            update = json.loads(body)
        else:
            update = body

        logger.info(f"Processing webhook update {update.get('update_id')}")
        success = asyncio.run(
            process_update(update, send_message, config.TELEGRAM_BOT_TOKEN)
        )

        # Always 200 so Telegram does not redeliver the update
        return {
            "statusCode": 200,
            "headers": JSON_HEADERS,
            "body": json.dumps({
                "ok": success,
                "message": "Update processed" if success else "Failed to process update"
            })
        }

    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse webhook body: {e}")
        return {
            "statusCode": 400,
            "headers": JSON_HEADERS,
            "body": json.dumps({"ok": False, "error": "Invalid JSON in request body"})
        }
    except Exception as e:
        logger.error(f"Error handling webhook update: {e}")
        logger.error(traceback.format_exc())
        return {
            "statusCode": 500,
            "headers": JSON_HEADERS,
            "body": json.dumps({"ok": False, "error": str(e)})
        }


def lambda_handler(event, context):
    if _is_api_gateway_event(event):
        logger.info("Detected API Gateway event - processing webhook")
        return handle_webhook_update(event)

    logger.info("Unknown event type - ignoring")
    return {
        "statusCode": 200,
        "headers": JSON_HEADERS,
        "body": json.dumps({"ok": True, "message": "Event ignored"})
    }
