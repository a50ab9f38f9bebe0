"""File templates of a new project.

Each template maps a role to the path of the file inside the project and the
text written there. Both go through `render`, which substitutes '$name' with
the project name.
"""

from pathlib import Path
from string import Template
from typing import NamedTuple


class FileTemplate(NamedTuple):
    path: str
    text: str


TEMPLATES: dict[str, FileTemplate] = {
    "config": FileTemplate(
        "pybuildcpp.toml",
        """\
[project]
name = "$name"
version = "0.1.0"
cxx = "g++"
std = "c++23"
cflags = []
""",
    ),
    "driver": FileTemplate(
        "build.py",
        """\
#!/usr/bin/env python3
\"\"\"Builds $name: python build.py [--debug|--release] [--executable|--static|--dynamic]\"\"\"
from pathlib import Path
import sys

from pybuildcpp.driver import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:], Path(__file__).resolve().parent, "build.py"))
""",
    ),
    "main": FileTemplate(
        "src/main.cpp",
        """\
#include <exception>
#include <iostream>

int main()
{
    try
    {
        std::cout << "Hello from $name!" << std::endl;
        return 0;
    }
    catch (const std::exception& e)
    {
        std::cerr << "Error: " << e.what() << std::endl;
        return 1;
    }
}
""",
    ),
    "header": FileTemplate(
        "include/$name.hpp",
        """\
#pragma once

#include <string>

namespace $name
{
    class ExampleClass
    {
    private:
        std::string name_;

    public:
        explicit ExampleClass(const std::string& name);

        std::string get_name() const;
        void set_name(const std::string& name);
    };
}
""",
    ),
    "source": FileTemplate(
        "src/$name.cpp",
        """\
#include "$name.hpp"

namespace $name
{
    ExampleClass::ExampleClass(const std::string& name) : name_(name)
    {
    }

    std::string ExampleClass::get_name() const
    {
        return name_;
    }

    void ExampleClass::set_name(const std::string& name)
    {
        name_ = name;
    }
}
""",
    ),
    "test": FileTemplate(
        "tests/test_main.cpp",
        """\
#include <cassert>
#include <iostream>

#include "$name.hpp"

int main()
{
    $name::ExampleClass example("test");
    assert(example.get_name() == "test");

    example.set_name("updated");
    assert(example.get_name() == "updated");

    std::cout << "All tests passed!" << std::endl;
    return 0;
}
""",
    ),
    "gitignore": FileTemplate(
        ".gitignore",
        """\
build/
.vcpkg/
""",
    ),
}


def render(template: FileTemplate, name: str) -> tuple[Path, str]:
    return (
        Path(Template(template.path).substitute(name=name)),
        Template(template.text).substitute(name=name),
    )
