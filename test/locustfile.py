import random
import string
import time
from locust import HttpUser, task, between, SequentialTaskSet

API = "/api/v1"


def random_string(length=8):
    letters = string.ascii_lowercase
    return ''.join(random.choice(letters) for i in range(length))


class ViewerScenario(SequentialTaskSet):

    def on_start(self):
        """
        Register and log in before the scenario runs.
        On a 5xx the server is given a moment before the scenario restarts.
        """
        self.username = f"user_{random_string(6)}"
        self.password = "testpass123"
        self.video_ids = []

        with self.client.post(f"{API}/users/register", data={
            "fullName": "Load Tester",
            "username": self.username,
            "email": f"{self.username}@example.com",
            "password": self.password,
        }, files={
            "avatar": ("avatar.png", b"avatar", "image/png"),
        }, name=f"{API}/users/register", catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Register. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return

        with self.client.post(f"{API}/users/login", json={
            "username": self.username,
            "password": self.password,
        }, catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Login. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return
            # the client keeps the auth cookies from here on

    @task
    def browse_feed(self):
        self.client.get("/health/alive")
        limit = random.choice([5, 10, 20])
        response = self.client.get(f"{API}/videos?limit={limit}&sortBy=views", name=f"{API}/videos")
        if response.ok:
            self.video_ids = [video["id"] for video in response.json()["data"]]

    @task
    def search(self):
        query = random.choice(["music", "cooking", "travel", "python"])
        self.client.get(f"{API}/videos/search?query={query}", name=f"{API}/videos/search")
        self.client.get(f"{API}/videos/suggestions?query={query[:3]}", name=f"{API}/videos/suggestions")

    @task
    def watch_and_like(self):
        if not self.video_ids:
            return
        video_id = random.choice(self.video_ids)
        self.client.get(f"{API}/videos/{video_id}", name=f"{API}/videos/[id]")
        self.client.post(f"{API}/videos/{video_id}/watch", name=f"{API}/videos/[id]/watch")
        self.client.post(f"{API}/likes/toggle/v/{video_id}", name=f"{API}/likes/toggle/v/[id]")
        self.client.get(f"{API}/comments/{video_id}", name=f"{API}/comments/[id]")

    @task
    def check_inbox(self):
        self.client.get(f"{API}/users/profile")
        self.client.get(f"{API}/notifications/unread/count")
        self.client.get(f"{API}/users/watch-history")

    @task
    def sign_out(self):
        self.client.post(f"{API}/users/logout")
        self.interrupt()


class WebsiteUser(HttpUser):
    tasks = [ViewerScenario]
    wait_time = between(1, 3)
