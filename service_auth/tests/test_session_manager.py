"""
Unit tests for the single-slot session.
"""

import threading

from service_auth.app.session import SessionManager


class TestSessionManager:
    """Test cases for SessionManager."""

    def test_starts_logged_out(self, sessions):
        assert sessions.current() is None
        assert sessions.is_logged_in() is False

    def test_login_then_logout(self, sessions, alice):
        sessions.login(alice)
        assert sessions.current() is alice
        assert sessions.is_logged_in() is True

        assert sessions.logout() is alice
        assert sessions.current() is None
        assert sessions.is_logged_in() is False

    def test_login_overwrites_existing_session(self, sessions, alice, bob):
        sessions.login(alice)
        replaced = sessions.login(bob)

        assert replaced is alice
        assert sessions.current() is bob

    def test_logout_is_idempotent(self, sessions):
        assert sessions.logout() is None
        assert sessions.logout() is None
        assert sessions.is_logged_in() is False

    def test_concurrent_logins_leave_one_client(self, alice, bob):
        sessions = SessionManager()
        barrier = threading.Barrier(2)
        observed = []

        def worker(client):
            barrier.wait()
            for _ in range(1000):
                sessions.login(client)
                observed.append(sessions.is_logged_in())
                current = sessions.current()
                observed.append(current is alice or current is bob)

        threads = [threading.Thread(target=worker, args=(c,)) for c in (alice, bob)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(observed)
        assert sessions.current() is alice or sessions.current() is bob

    def test_readers_only_see_completed_transitions(self, alice):
        sessions = SessionManager()
        stop = threading.Event()
        seen = []

        def flipper():
            while not stop.is_set():
                sessions.login(alice)
                sessions.logout()

        thread = threading.Thread(target=flipper)
        thread.start()
        for _ in range(5000):
            current = sessions.current()
            seen.append(current is None or current is alice)
        stop.set()
        thread.join()

        assert all(seen)
