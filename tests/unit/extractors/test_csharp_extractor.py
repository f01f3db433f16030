from __future__ import annotations

from project_index.extractors import CSharpExtractor

SOURCE = """\
using System;
using System.Collections.Generic;

namespace Shop
{
    public interface IRepository
    {
        void Save(Order order);
    }

    public sealed class OrderRepository : IRepository
    {
        private const int MAX_BATCH = 50;

        public void Save(Order order)
        {
            if (order == null)
            {
                throw new ArgumentNullException(nameof(order));
            }
        }

        public async Task<int> CountAsync() => await Task.FromResult(0);
    }

    public enum OrderState { New, Shipped }
}
"""


def test_csharp_extractor_collects_usings_and_public_types() -> None:
    fragment = CSharpExtractor().extract("src/Shop.cs", SOURCE)

    assert fragment.imports == ("System", "System.Collections.Generic")
    assert fragment.interfaces == ("IRepository",)
    assert fragment.classes == ("OrderRepository",)
    assert fragment.types == ("OrderState",)


def test_csharp_extractor_collects_methods_and_constants() -> None:
    fragment = CSharpExtractor().extract("src/Shop.cs", SOURCE)

    assert fragment.functions == ("Save", "CountAsync")
    assert fragment.constants == ("MAX_BATCH",)


def test_csharp_extractor_handles_single_public_class() -> None:
    fragment = CSharpExtractor().extract("Svc.cs", "public class Svc {}\n")

    assert fragment.classes == ("Svc",)
