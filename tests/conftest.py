"""Shared test fixtures for postrecord."""

import pytest

from postrecord.config.models import PostRecordConfig


SAMPLE_POST = """\
---
layout: single
title: "Spring DI without Spring Boot"
author: asher
permalink: spring-di-without-spring-boot/
last_modified_at: 2020-12-17T00:00:00
excerpt: Wiring a plain Java app with the Spring container.
category:
  - java
  - spring
featured: true
comments: true
toc: true
image: assets/images/spring.png
---

Spring is usually pulled in through Boot, but the container works fine alone.
"""


@pytest.fixture
def raw_front_matter():
    """The minimal valid mapping: only the required fields."""
    return {
        "layout": "post",
        "title": "X",
        "author": "asher",
        "permalink": "spring-di-without-spring-boot/",
        "last_modified_at": "2020-12-17T00:00:00",
    }


@pytest.fixture
def sample_post():
    return SAMPLE_POST


@pytest.fixture
def sample_config():
    return PostRecordConfig()


@pytest.fixture
def write_post(tmp_path):
    """Write a post built from front-matter lines into tmp_path."""

    def _write(name, permalink="a-post/", title="A post", extra="", body="Body.\n"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            "---\n"
            "layout: post\n"
            f"title: {title}\n"
            "author: asher\n"
            f"permalink: {permalink}\n"
            "last_modified_at: 2021-01-05 09:30:00 +0800\n"
            f"{extra}"
            "---\n"
            f"{body}",
            encoding="utf-8",
        )
        return path

    return _write
