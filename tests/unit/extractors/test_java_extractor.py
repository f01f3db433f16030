from __future__ import annotations

from project_index.extractors import JavaExtractor

SOURCE = """\
package com.example.app;

import java.util.List;
import static java.lang.Math.max;

public class OrderService implements Service {
    public static final int MAX_ORDERS = 100;
    private static final String prefix = "x";

    public OrderService(List<String> items) {
        this.items = items;
    }

    public List<String> listOrders(int limit) throws IOException {
        if (limit > 0) {
            return items;
        }
        return helper(limit);
    }

    private void reset() {
    }
}

interface Service {
    void run();
}

enum Status { OPEN, CLOSED }
"""


def test_java_extractor_collects_imports_and_types() -> None:
    fragment = JavaExtractor().extract("src/OrderService.java", SOURCE)

    assert fragment.imports == ("java.util.List", "java.lang.Math.max")
    assert fragment.classes == ("OrderService", "Status")
    assert fragment.interfaces == ("Service",)


def test_java_extractor_skips_control_flow_and_calls() -> None:
    fragment = JavaExtractor().extract("src/OrderService.java", SOURCE)

    assert fragment.functions == ("OrderService", "listOrders", "reset", "run")
    assert "if" not in fragment.functions
    assert "helper" not in fragment.functions


def test_java_extractor_collects_static_final_constants() -> None:
    fragment = JavaExtractor().extract("src/OrderService.java", SOURCE)

    assert fragment.constants == ("MAX_ORDERS",)


def test_java_extractor_handles_single_public_class() -> None:
    fragment = JavaExtractor().extract(
        "Widget.java", "public class Widget {\n    void draw() {}\n}\n"
    )

    assert fragment.classes == ("Widget",)
    assert fragment.functions == ("draw",)
