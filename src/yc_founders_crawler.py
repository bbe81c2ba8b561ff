#!/usr/bin/env python3
"""
YC Founders Crawler
Crawls the Y Combinator company directory, visits every company page and
collects the LinkedIn profiles listed under "Active Founders"
"""

import logging
import os
import sys
import time
from typing import List, Optional
from urllib.parse import urljoin

import pandas as pd
from bs4 import BeautifulSoup
from dotenv import find_dotenv, load_dotenv
from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from tqdm import tqdm
from webdriver_manager.chrome import ChromeDriverManager

from founder_models import Company, CrawlResult, Founder

logger = logging.getLogger(__name__)

SITE_ORIGIN = "https://www.ycombinator.com"
COMPANY_LINK_SELECTOR = "a._company_i9oky_355"
COMPANY_NAME_SELECTOR = "h1.text-3xl.font-bold"
COMPANY_WEBSITE_SELECTOR = '.text-linkColor a[href^="http"]'
FOUNDERS_MARKER = "Active Founders"
LINKEDIN_HOST = "linkedin.com"
LINKEDIN_PROFILE_MARKER = "linkedin.com/in/"

BROWSER_PATH_ENV = "BROWSER_EXECUTABLE_PATH"
CHROME_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
]

# Seconds
COMPANY_PAGE_TIMEOUT = 30
PAGE_READY_TIMEOUT = 15
SCROLL_INTERVAL = 0.1
SETTLE_DELAY = 2.0

SCROLL_STEP = 100
MAX_SCROLL_TICKS = 5000

DEFAULT_OUTPUT = os.path.join("output", "yc_founders.csv")
CSV_COLUMNS = ["Company Name", "Company Website", "Founder Profile"]

USAGE = (
    "ROOT parameter is required.\n"
    "Usage: python run_yc_crawler.py "
    "'https://www.ycombinator.com/companies?batch=Summer%202025&isHiring=true'"
)


def parse_company_details(html: str, base_url: str = SITE_ORIGIN) -> Company:
    """Extract the company name and website from a rendered company page.

    Never raises: anything that goes wrong degrades to an empty Company so the
    founders on the page can still be recorded.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")

        name_element = soup.select_one(COMPANY_NAME_SELECTOR)
        name = name_element.get_text().strip() if name_element else ''

        website_element = soup.select_one(COMPANY_WEBSITE_SELECTOR)
        website = ''
        if website_element and website_element.get('href'):
            website = urljoin(base_url, website_element['href'])

        return Company(name=name, website=website)
    except Exception as e:
        logger.error("Error extracting company details from %s: %s", base_url, e)
        return Company()


def parse_linkedin_profiles(html: str, base_url: str = SITE_ORIGIN,
                            marker: str = FOUNDERS_MARKER) -> List[str]:
    """Return personal LinkedIn URLs from the first section mentioning the marker"""
    soup = BeautifulSoup(html, "html.parser")

    founders_section = None
    for section in soup.find_all("section"):
        if marker in section.get_text():
            founders_section = section
            break

    if founders_section is None:
        return []

    profiles = []
    for anchor in founders_section.select(f'a[href*="{LINKEDIN_HOST}"]'):
        href = urljoin(base_url, anchor['href'])
        # Company pages and other LinkedIn links are not founders
        if LINKEDIN_PROFILE_MARKER in href:
            profiles.append(href)

    return profiles


class YCFoundersCrawler:
    def __init__(self, headless: bool = True, driver=None,
                 founders_marker: str = FOUNDERS_MARKER,
                 page_timeout: float = COMPANY_PAGE_TIMEOUT,
                 max_scroll_ticks: int = MAX_SCROLL_TICKS):
        self.headless = headless
        self.driver = driver
        self.founders_marker = founders_marker
        self.page_timeout = page_timeout
        self.max_scroll_ticks = max_scroll_ticks

    def setup_driver(self):
        """Initialize Chrome WebDriver with options"""
        load_dotenv(find_dotenv(usecwd=True))

        chrome_options = Options()
        if self.headless:
            chrome_options.add_argument("--headless=new")
        for argument in CHROME_ARGS:
            chrome_options.add_argument(argument)

        executable_path = os.getenv(BROWSER_PATH_ENV)
        if executable_path:
            print(f"Using browser executable: {executable_path}")
            chrome_options.binary_location = executable_path

        try:
            driver_path = ChromeDriverManager().install()
            service = Service(driver_path)
            self.driver = webdriver.Chrome(service=service, options=chrome_options)
        except Exception as e:
            logger.warning("ChromeDriverManager failed: %s", e)
            print("Trying to use system Chrome driver...")
            try:
                self.driver = webdriver.Chrome(options=chrome_options)
            except Exception as e2:
                raise RuntimeError(
                    "Could not initialize Chrome WebDriver. "
                    "Please ensure Chrome and chromedriver are installed."
                ) from e2

    def close(self):
        if self.driver:
            self.driver.quit()
            self.driver = None

    def wait_for_page_load(self, timeout: float = PAGE_READY_TIMEOUT):
        """Block until the document and its subresources have finished loading"""
        WebDriverWait(self.driver, timeout).until(
            lambda driver: driver.execute_script("return document.readyState") == "complete"
        )

    def open_page(self, url: str, timeout: Optional[float] = None):
        """Navigate to url; a timeout bounds load and readiness together and raises TimeoutException"""
        if timeout is None:
            self.driver.get(url)
            self.wait_for_page_load()
            return

        started = time.monotonic()
        self.driver.set_page_load_timeout(timeout)
        self.driver.get(url)
        self.wait_for_page_load(max(timeout - (time.monotonic() - started), 0))

    def auto_scroll(self) -> int:
        """Scroll until the page stops growing, then let trailing content render"""
        total_height = 0
        ticks = 0

        while ticks < self.max_scroll_ticks:
            scroll_height = self.driver.execute_script("return document.body.scrollHeight")
            self.driver.execute_script("window.scrollBy(0, arguments[0]);", SCROLL_STEP)
            total_height += SCROLL_STEP
            ticks += 1

            if total_height >= scroll_height:
                break
            time.sleep(SCROLL_INTERVAL)
        else:
            logger.warning("Stopped scrolling after %d ticks; page height kept growing", ticks)

        time.sleep(SETTLE_DELAY)
        return ticks

    def get_company_links(self, root_url: str) -> List[str]:
        """Load the directory, exhaust its infinite scroll and collect company URLs"""
        try:
            self.open_page(root_url)

            print("Loading all companies...")
            self.auto_scroll()

            links = []
            for element in self.driver.find_elements(By.CSS_SELECTOR, COMPANY_LINK_SELECTOR):
                href = element.get_dom_attribute('href')
                if not href:
                    continue
                links.append(href if href.startswith('http') else f"{SITE_ORIGIN}{href}")

            print("Loading done!")
            return links
        except Exception as e:
            logger.error("Error fetching companies from %s: %s", root_url, e)
            raise

    def get_company_details(self) -> Company:
        try:
            return parse_company_details(self.driver.page_source, self.driver.current_url)
        except Exception as e:
            logger.error("Error reading company page: %s", e)
            return Company()

    def get_linkedin_profiles(self) -> List[str]:
        return parse_linkedin_profiles(
            self.driver.page_source, self.driver.current_url, self.founders_marker
        )

    def get_founders_details(self, company_links: List[str]) -> CrawlResult:
        """Visit every company page in order; a failing company is skipped, never fatal"""
        result = CrawlResult(total=len(company_links))
        print(f"Starting to process {result.total} companies...")

        with tqdm(total=result.total, desc="Processing companies", unit="company") as progress:
            for index, company_link in enumerate(company_links, start=1):
                try:
                    self.open_page(company_link, timeout=self.page_timeout)

                    company = self.get_company_details()
                    founders = [
                        Founder(company=company, linkedin_profile=profile)
                        for profile in self.get_linkedin_profiles()
                    ]
                except Exception as e:
                    result.skipped += 1
                    progress.write(f"⚠️  Skipped company {index} ({company_link}) due to error: {e}")
                    continue
                finally:
                    progress.update(1)

                if founders:
                    result.contributing += 1
                    result.founders.extend(founders)

        print(
            f"✅ Processed {result.total} companies. "
            f"With founders: {result.contributing}, Skipped: {result.skipped}, "
            f"Founder profiles: {len(result.founders)}"
        )
        return result

    def scrape_founders(self, root_url: str) -> CrawlResult:
        """Main crawling method; a failure on the directory page propagates"""
        print("Starting YC Founders crawler...")
        if self.driver is None:
            self.setup_driver()

        try:
            company_links = self.get_company_links(root_url)
            print(f"Companies links loaded! Found {len(company_links)} companies")
            return self.get_founders_details(company_links)
        finally:
            self.close()

    def save_to_csv(self, founders: List[Founder], filename: str = DEFAULT_OUTPUT) -> bool:
        """Save founders to CSV, overwriting any previous run"""
        rows = [
            (founder.company.name, founder.company.website, founder.linkedin_profile)
            for founder in founders
        ]
        data = pd.DataFrame(rows, columns=CSV_COLUMNS)

        try:
            output_dir = os.path.dirname(filename)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)

            with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
                csvfile.write(",".join(CSV_COLUMNS) + "\n")
                # Fields are wrapped in quotes as-is; embedded quotes are not escaped
                if not data.empty:
                    quoted = data.apply(lambda column: '"' + column + '"')
                    for line in quoted.apply(",".join, axis=1):
                        csvfile.write(line + "\n")
        except Exception as e:
            logger.error("Error saving CSV file %s: %s", filename, e)
            return False

        print(f"Data saved to {filename}")
        print(f"Total founder profiles saved: {len(founders)}")
        return True


def main(argv: Optional[List[str]] = None):
    """Main execution function"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE, file=sys.stderr)
        return

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

    root_url = args[0]
    print("Starting to scrape YC Founders...")
    print(f"Root: {root_url}")

    crawler = YCFoundersCrawler(headless=True)
    try:
        result = crawler.scrape_founders(root_url)
    except Exception as e:
        logger.error("Error: %s", e)
        return

    crawler.save_to_csv(result.founders)


if __name__ == "__main__":
    main()
