from aiohttp import web
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

# Track bot start time for uptime reporting
_START_TIME = datetime.now(timezone.utc)


def build_health_app(bot=None) -> web.Application:
    """aiohttp app with `/` and `/health`.

    `/health` must answer fast for container health checks, so it never
    touches Discord or the upstream APIs; it only reports uptime and
    whether the gateway connection is ready.
    """
    app = web.Application()

    async def handle_root(request):
        return web.Response(text='OK', content_type='text/plain')

    async def handle_health(request):
        now = datetime.now(timezone.utc)
        resp = {
            'status': 'healthy',
            'uptime_seconds': int((now - _START_TIME).total_seconds()),
            'timestamp': now.isoformat(),
        }
        if bot is not None:
            resp['discord_ready'] = bot.is_ready()
        logger.debug(f"Health check: OK (uptime: {resp['uptime_seconds']}s)")
        return web.json_response(resp)

    app.add_routes([
        web.get('/', handle_root),
        web.get('/health', handle_health),
    ])
    return app


async def start_health_server(port: int, bot=None):
    """Start the health server in the background on the running loop.

    Returns the AppRunner on success, or None if the port could not be
    bound so the bot can keep starting without it.
    """
    runner = web.AppRunner(build_health_app(bot))
    await runner.setup()
    site = web.TCPSite(runner, '0.0.0.0', port)
    try:
        await site.start()
    except OSError as e:
        logger.warning(f"Health server could not bind to 0.0.0.0:{port}: {e}")
        await runner.cleanup()
        return None

    logger.info(f'Health server started on port {port}')
    logger.info(f'  - Health check: http://0.0.0.0:{port}/health')
    return runner
