import asyncio
import json
from typing import Any, Dict, List, Optional, Tuple

import httpx

from overseas.learner.api import PlatformClient
from overseas.learner.checkout import CheckoutOptions, CheckoutResult, CheckoutWidget

BASE_URL = "http://platform.test"

SESSION_USER = {
    "id": 7,
    "firstName": "Asha",
    "lastName": "Verma",
    "email": "asha@learners.io",
    "phone": "9876543210",
    "role": "STUDENT",
}


def enrollment_body(course_id: int = 3, progress: int = 0, status: str = "ACTIVE") -> Dict[str, Any]:
    return {"id": 11, "userId": 7, "courseId": course_id, "status": status, "progress": progress}


def lesson_body(lesson_id: int, completed: bool = False, **extra) -> Dict[str, Any]:
    return {
        "id": lesson_id,
        "title": f"Lesson {lesson_id}",
        "type": "VIDEO",
        "progress": {"isCompleted": completed, "progressPercentage": 100 if completed else 0},
        **extra,
    }


class FakePlatform:
    """Routes learner API calls to canned responses and records what was sent."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.gates: Dict[Tuple[str, str], asyncio.Event] = {}
        self.calls: List[Tuple[str, str, Any]] = []
        self.headers: List[httpx.Headers] = []

    def on(self, method: str, path: str, status: int = 200, json: Any = None) -> None:
        self.routes[(method, path)] = (status, json)

    def hold(self, method: str, path: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[(method, path)] = gate
        return gate

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [path for m, path, _ in self.calls if method is None or m == method]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        key = (request.method, request.url.path)
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, request.url.path, body))
        self.headers.append(request.headers)

        if key in self.gates:
            await self.gates[key].wait()
        if key not in self.routes:
            return httpx.Response(404, json={"error": {"code": "NOT_FOUND", "message": "Not Found"}})

        status, payload = self.routes[key]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)

    def client(self, token: Optional[str] = "learner-token") -> PlatformClient:
        return PlatformClient(BASE_URL, token=token, transport=httpx.MockTransport(self))


class ScriptedWidget(CheckoutWidget):
    def __init__(self, result: CheckoutResult):
        self.result = result
        self.opened: List[CheckoutOptions] = []

    async def open(self, options: CheckoutOptions) -> CheckoutResult:
        self.opened.append(options)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class RecordingUI:
    def __init__(self):
        self.notifications: List[Tuple[str, str, bool]] = []
        self.redirects: List[str] = []
        self.reloads = 0
        self.modal_changes: List[bool] = []

    def notify(self, title: str, message: str, destructive: bool = False) -> None:
        self.notifications.append((title, message, destructive))

    def redirect(self, url: str) -> None:
        self.redirects.append(url)

    def reload(self) -> None:
        self.reloads += 1

    def show_payment_modal(self, visible: bool) -> None:
        self.modal_changes.append(visible)
