"""
分发层常量

请求头名称、响应类型标记、引导脚本名称等固定值集中在这里，
避免在分发/错误处理代码里散落魔法字符串。
"""

# ============================================================================
# 请求头
# ============================================================================

AJAX_VERSION_HEADER = "x-ajax-version"
XHR_HEADER = "x-requested-with"
XHR_HEADER_VALUE = "xmlhttprequest"

# ============================================================================
# 响应头
# ============================================================================

RESPONSE_TYPE_HEADER = "x-response-type"


class ResponseType:
    """x-response-type 的取值，仅出现在数据路径（XHR）上"""

    STRING = "string"
    JSON = "json"
    ERROR = "error"


# ============================================================================
# 页面
# ============================================================================

DEFAULT_STATUS_CODE = 200
NOT_FOUND_BODY = "Page Not Found"
DEFAULT_LOCALE = "en"

# 内联到 <head> 中的两个引导脚本（按此顺序输出）
BROWSER_SUPPORT_CHECK_SCRIPT = "browserSupportCheck.js"
ROUTES_FETCHER_SCRIPT = "routesFetcher.js"
BOOTSTRAP_SCRIPTS = (BROWSER_SUPPORT_CHECK_SCRIPT, ROUTES_FETCHER_SCRIPT)

DEFAULT_WRONG_VERSION_MESSAGE = "The application was updated. Please reload the page."
