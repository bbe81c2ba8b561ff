import pytest
from selenium.common.exceptions import TimeoutException

import yc_founders_crawler


class FakeElement:
    def __init__(self, href):
        self.href = href

    def get_dom_attribute(self, name):
        return self.href if name == 'href' else None


class FakeDriver:
    """Stands in for a Chrome WebDriver: serves canned HTML and a scripted page height"""

    def __init__(self, pages=None, heights=None, anchors=None, failing=()):
        self.pages = pages or {}
        self.heights = list(heights or [0])
        self.anchors = anchors or []
        self.failing = set(failing)
        self.current_url = None
        self.visited = []
        self.page_load_timeouts = []
        self.height_reads = 0
        self.scrolled = 0
        self.quit_called = False

    def set_page_load_timeout(self, timeout):
        self.page_load_timeouts.append(timeout)

    def get(self, url):
        self.visited.append(url)
        if url in self.failing:
            raise TimeoutException(f"Timed out receiving message from renderer: {url}")
        self.current_url = url

    @property
    def page_source(self):
        return self.pages.get(self.current_url, "<html><body></body></html>")

    def execute_script(self, script, *args):
        if "readyState" in script:
            return "complete"
        if "scrollHeight" in script:
            height = self.heights[min(self.height_reads, len(self.heights) - 1)]
            self.height_reads += 1
            return height
        if "scrollBy" in script:
            self.scrolled += args[0]
            return None
        raise AssertionError(f"unexpected script: {script}")

    def find_elements(self, by, value):
        return list(self.anchors)

    def quit(self):
        self.quit_called = True


def company_page(name="Acme", website="https://acme.test", linkedin_links=(), founders_marker="Active Founders"):
    anchors = "".join(f'<a href="{link}">LinkedIn</a>' for link in linkedin_links)
    founders = ""
    if founders_marker:
        founders = f"<section><h2>{founders_marker}</h2><div>{anchors}</div></section>"
    return f"""
    <html><body>
      <section>
        <h1 class="text-3xl font-bold"> {name} </h1>
        <div class="text-linkColor"><a href="{website}">{website}</a></div>
      </section>
      <section><h2>Latest News</h2><a href="https://www.linkedin.com/in/journalist">press</a></section>
      {founders}
    </body></html>
    """


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(yc_founders_crawler.time, "sleep", calls.append)
    return calls
