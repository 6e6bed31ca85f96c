"""
Load testing for the Bank Auth service using Locust.

Run against a live service:

    locust -f tests/performance/locustfile.py --host http://localhost:8010

SessionUser exercises the normal login/inspect/logout cycle. LatencyUser
occasionally changes the injected delays so the session traffic can be
observed against a slow backend; keep its weight low.
"""

import random

import requests
from locust import HttpUser, TaskSet, task, between, events


DEMO_CREDENTIALS = [("user1", "pass1"), ("user2", "pass2")]

DELAYED_OPERATIONS = ["login", "logout", "loggedUser", "isLogged", "register"]


class SessionTasks(TaskSet):
    """Login, inspect and logout against the single session slot."""

    @task(3)
    def login(self):
        username, password = random.choice(DEMO_CREDENTIALS)
        with self.client.post(
            "/auth/login",
            params={"username": username, "password": password},
            name="/auth/login",
            catch_response=True,
        ) as response:
            if response.status_code == 200 and username in response.text:
                response.success()
            else:
                response.failure(f"Unexpected login response: {response.status_code}")

    @task(1)
    def bad_login(self):
        with self.client.post(
            "/auth/login",
            params={"username": "user1", "password": "wrong"},
            name="/auth/login [bad]",
            catch_response=True,
        ) as response:
            if response.status_code == 401:
                response.success()
            else:
                response.failure(f"Expected 401, got {response.status_code}")

    @task(4)
    def is_logged(self):
        with self.client.get("/auth/isLogged", catch_response=True) as response:
            if response.status_code == 200 and response.json() in (True, False):
                response.success()
            else:
                response.failure(f"Unexpected status code: {response.status_code}")

    @task(2)
    def logged_user(self):
        with self.client.get("/auth/loggedUser", catch_response=True) as response:
            # 401 is legitimate: another user may have logged out in between.
            if response.status_code in (200, 401):
                response.success()
            else:
                response.failure(f"Unexpected status code: {response.status_code}")

    @task(1)
    def logout(self):
        with self.client.post("/auth/logout", catch_response=True) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Unexpected status code: {response.status_code}")

    @task(1)
    def list_clients(self):
        with self.client.get("/auth/clients", catch_response=True) as response:
            if response.status_code == 200 and isinstance(response.json(), list):
                response.success()
            else:
                response.failure(f"Unexpected status code: {response.status_code}")


class LatencyTasks(TaskSet):
    """Flip injected delays between zero and a small value."""

    @task
    def set_timeout(self):
        operation = random.choice(DELAYED_OPERATIONS)
        timeout = random.choice([0, 0, 1])
        with self.client.post(
            "/auth/setTimeout",
            params={"type": operation, "timeout": timeout},
            name="/auth/setTimeout",
            catch_response=True,
        ) as response:
            if response.status_code == 200 and response.json()["timeouts"][operation] == timeout:
                response.success()
            else:
                response.failure(f"Unexpected setTimeout response: {response.status_code}")


class SessionUser(HttpUser):
    tasks = [SessionTasks]
    wait_time = between(0.1, 0.5)
    weight = 10


class LatencyUser(HttpUser):
    tasks = [LatencyTasks]
    wait_time = between(5, 10)
    weight = 1


@events.test_stop.add_listener
def reset_timeouts(environment, **kwargs):
    """Leave the service without injected delays after the run."""
    if not environment.host:
        return

    for operation in DELAYED_OPERATIONS:
        requests.post(
            f"{environment.host}/auth/setTimeout",
            params={"type": operation, "timeout": 0},
            timeout=5,
        )
