"""
请求分类

XHR 与 HTML 两个信号同时为真或同时为假时，一律按 XHR 处理，
保证分发器只会看到两种协商结果之一。
"""

from starlette.requests import Request

from pagewright.app.context import RequestClassification
from pagewright.utils.request_utils import is_request_html, is_request_xhr


def classify_request(is_xhr: bool, is_html: bool) -> RequestClassification:
    if is_xhr == is_html:
        return RequestClassification(is_xhr=True, is_html=False)
    return RequestClassification(is_xhr=is_xhr, is_html=is_html)


def classify(request: Request) -> RequestClassification:
    return classify_request(is_request_xhr(request), is_request_html(request))
