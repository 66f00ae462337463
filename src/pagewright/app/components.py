"""
请求分发

所有 HTTP 请求最终都进入 AppComponents.parse_request：
1. 根据请求信号分类（整页 HTML / 数据 XHR）
2. 解析请求参数，创建本请求独占的 ChunkParams
3. GET + HTML 走整页路径，其余全部走数据路径
4. 任何失败都转换为统一的错误信封

每个挂起点（await 协作者）之后都要先检查响应是否已经结束，已结束则静默放弃，
这是系统中唯一的取消信号。
"""

from __future__ import annotations

from pagewright.app.context import ChunkParams, QueryParams
from pagewright.app.document import build_base_href, build_document
from pagewright.app.early_hints import EarlyHintEmitter
from pagewright.app.error_envelope import ErrorEnvelopeBuilder
from pagewright.app.negotiation import classify
from pagewright.app.results import ProcessResult, ResultKind
from pagewright.config.constants import (
    AJAX_VERSION_HEADER,
    BOOTSTRAP_SCRIPTS,
    DEFAULT_STATUS_CODE,
    NOT_FOUND_BODY,
    RESPONSE_TYPE_HEADER,
    ResponseType,
)
from pagewright.config.settings import Config
from pagewright.core.exceptions import (
    InternalServerError,
    RequestParametersError,
    WrongAjaxVersionError,
)
from pagewright.core.logger import logger
from pagewright.server.exchange import HttpExchange, HttpResponse
from pagewright.server.formatter import ResponseFormatter, ResponseKind, ServerResponseFormatter
from pagewright.services.collaborators import (
    ComponentProcessor,
    FileManager,
    LayoutRenderer,
    ScriptRepository,
)
from pagewright.services.scripts import FileScriptRepository
from pagewright.utils.locale import resolve_locale
from pagewright.utils.request_utils import (
    get_header_as_string,
    get_post_request_parameters,
    get_query_string_parameters,
)


class AppComponents:
    """请求分发器：整页文档合成 + 数据响应 + 统一错误处理"""

    def __init__(
        self,
        app_config: Config,
        *,
        layout: LayoutRenderer,
        processor: ComponentProcessor,
        file_manager: FileManager,
        scripts: ScriptRepository | None = None,
        formatter: ResponseFormatter | None = None,
    ) -> None:
        self.config = app_config
        self._layout = layout
        self._processor = processor
        self._file_manager = file_manager
        self._scripts = scripts or FileScriptRepository(
            app_config.scripts_dir, minify=not app_config.development
        )
        self._formatter = formatter or ServerResponseFormatter(
            max_age=app_config.max_age, mime_types=app_config.mime_types
        )
        self._error_builder = ErrorEnvelopeBuilder(self._formatter)
        self._early_hints = EarlyHintEmitter()

    @property
    def development(self) -> bool:
        return bool(self.config.development)

    async def ensure_component_is_rendered(self, component_name: str) -> None:
        """强制渲染指定组件"""
        await self._file_manager.ensure_component_is_rendered(component_name)

    async def parse_request(self, exchange: HttpExchange, path_segments: list[str]) -> None:
        request = exchange.request
        response = exchange.response

        classification = classify(request)
        logger.debug(
            "请求分类: {} /{} -> {}",
            request.method,
            "/".join(path_segments),
            classification.mode.value,
        )

        try:
            query_params = QueryParams(
                query=await get_post_request_parameters(request),
                query_get=get_query_string_parameters(request),
            )
        except RequestParametersError as exc:
            logger.warning("请求参数解析失败: {}", exc)
            await self._respond_with_error(response, exc, True)
            return

        chunk_params = ChunkParams(
            exchange=exchange,
            is_xhr=classification.is_xhr,
            is_html=classification.is_html,
            query_params=query_params,
        )

        try:
            if request.method == "GET" and not chunk_params.is_xhr and chunk_params.is_html:
                await self._process_request_as_html_page(chunk_params, path_segments)
            else:
                await self._process_request_as_xhr(chunk_params, path_segments)
        except Exception as exc:
            logger.exception("请求处理异常: {} {}", request.method, request.url.path)
            if response.is_ended():
                return
            if response.status_code == DEFAULT_STATUS_CODE:
                response.status_code = 500
            await self._respond_with_error(
                response, exc if self.development else InternalServerError(), True
            )

    async def _process_request_as_html_page(
        self, chunk_params: ChunkParams, path_segments: list[str]
    ) -> None:
        assets = chunk_params.components_assets
        request = chunk_params.exchange.request
        response = chunk_params.exchange.response

        try:
            html = await self._layout.make_layout_html(path_segments, chunk_params)
        except Exception as exc:
            # 无论是否开发模式都记录完整异常
            logger.exception("页面渲染失败: /{}", "/".join(path_segments))
            if response.is_ended():
                return
            response.status_code = 500
            await self._respond_with_error(
                response, exc if self.development else InternalServerError(), True
            )
            return

        if response.is_ended():
            logger.debug("渲染期间响应已结束，放弃写入: /{}", "/".join(path_segments))
            return

        if html is None:
            # 404 页面不组装资源，也不发送 Early Hints
            response.status_code = 404
            html = NOT_FOUND_BODY
        else:
            version = await self._file_manager.get_asset_version_token()
            locale = resolve_locale(
                request, self.config.supported_locales, self.config.default_locale
            )

            if response.is_ended():
                return

            bootstrap_scripts = [await self._scripts.get_script(name) for name in BOOTSTRAP_SCRIPTS]

            if response.is_ended():
                return

            styles, scripts = assets.stringify()
            html = build_document(
                content=html,
                base_href=build_base_href(request.url.netloc, version),
                locale=locale,
                head_tags=chunk_params.html_head_tags,
                styles=styles,
                scripts=scripts,
                bootstrap_scripts=bootstrap_scripts,
            )

            if self.config.early_hints and response.supports_early_hints:
                await self._early_hints.emit(response, version, assets)
                if response.is_ended():
                    return

        self._formatter.set_headers(response, ResponseKind.HTML)
        await response.end(html)

    async def _process_request_as_xhr(
        self, chunk_params: ChunkParams, path_segments: list[str]
    ) -> None:
        request = chunk_params.exchange.request
        response = chunk_params.exchange.response

        ajax_version = str(self.config.ajax_version or "")
        client_version = get_header_as_string(request, AJAX_VERSION_HEADER) or ""

        if client_version and client_version != ajax_version:
            logger.warning(
                "XHR 协议版本不一致: 客户端={}, 服务端={}", client_version, ajax_version
            )
            error = WrongAjaxVersionError(
                self.config.ajax_wrong_version_message,
                client_version=client_version,
                server_version=ajax_version,
            )
            await self._respond_with_error(response, error, True)
            return

        value = await self._processor.process(path_segments, chunk_params)

        if response.is_ended():
            logger.debug("处理期间响应已结束，放弃写入: /{}", "/".join(path_segments))
            return

        result = ProcessResult.from_value(value)

        if result.kind is ResultKind.ERROR:
            await self._respond_with_error(response, result.value, result.is_throw)
        elif result.kind is ResultKind.STRING:
            self._formatter.set_headers(response, ResponseKind.TXT)
            response.set_header(RESPONSE_TYPE_HEADER, ResponseType.STRING)
            await response.end(result.value)
        else:
            self._formatter.set_headers(response, ResponseKind.JSON)
            response.set_header(RESPONSE_TYPE_HEADER, ResponseType.JSON)
            await response.end(result.to_json())

    async def _respond_with_error(
        self, response: HttpResponse, error: BaseException, is_throw: bool
    ) -> None:
        await self._error_builder.respond(response, error, is_throw, self.development)
