"""Shared fixtures: sample Blazor projects on disk and a fake ToolRunner."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest


STANDALONE_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk.Web">

  <PropertyGroup>
    <TargetFramework>netstandard2.0</TargetFramework>
    <RunCommand>dotnet</RunCommand>
    <RunArguments>blazor serve</RunArguments>
    <LangVersion>7.3</LangVersion>
  </PropertyGroup>

  <ItemGroup>
    <PackageReference Include="Microsoft.AspNetCore.Blazor.Browser" Version="0.4.0" />
    <PackageReference Include="Microsoft.AspNetCore.Blazor.Build" Version="0.4.0" />
    <DotNetCliToolReference Include="Microsoft.AspNetCore.Blazor.Cli" Version="0.4.0" />
  </ItemGroup>

</Project>
"""

CLIENT_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk.Web">

  <PropertyGroup>
    <TargetFramework>netstandard2.0</TargetFramework>
    <LangVersion>7.3</LangVersion>
  </PropertyGroup>

  <ItemGroup>
    <PackageReference Include="Microsoft.AspNetCore.Blazor.Browser" Version="0.4.0" />
    <PackageReference Include="Microsoft.AspNetCore.Blazor.Build" Version="0.4.0" />
  </ItemGroup>

  <ItemGroup>
    <ProjectReference Include="..\\Shared\\Hosted.Shared.csproj" />
  </ItemGroup>

</Project>
"""

SERVER_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk.Web">

  <PropertyGroup>
    <TargetFramework>netcoreapp2.1</TargetFramework>
    <LangVersion>7.3</LangVersion>
  </PropertyGroup>

  <ItemGroup>
    <PackageReference Include="Microsoft.AspNetCore.App" />
    <PackageReference Include="Microsoft.AspNetCore.Blazor.Server" Version="0.4.0" />
  </ItemGroup>

  <ItemGroup>
    <ProjectReference Include="..\\Client\\Hosted.Client.csproj" />
    <ProjectReference Include="..\\Shared\\Hosted.Shared.csproj" />
  </ItemGroup>

</Project>
"""

SHARED_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk">

  <PropertyGroup>
    <TargetFramework>netstandard2.0</TargetFramework>
  </PropertyGroup>

</Project>
"""

INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width">
    <title>App</title>
    <base href="/" />
    <link href="css/bootstrap/bootstrap.min.css" rel="stylesheet" />
    <link href="css/site.css" rel="stylesheet" />
</head>
<body>
    <app>Loading...</app>

    <script src="_framework/blazor.webassembly.js"></script>
</body>
</html>
"""

PROGRAM_CS = """using Microsoft.AspNetCore.Blazor.Browser.Rendering;
using Microsoft.AspNetCore.Blazor.Browser.Services;

namespace App
{
    public class Program
    {
        static void Main(string[] args)
        {
            var serviceProvider = new BrowserServiceProvider(services =>
            {
                // Add any custom services here
            });

            new BrowserRenderer(serviceProvider).AddComponent<App>("app");
        }
    }
}
"""


class FakeRunner:
    """ToolRunner that records calls instead of launching processes."""

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.calls = []

    def run(self, command, args, cwd=None):
        self.calls.append((command, list(args), cwd))
        return self.exit_code

    @property
    def args(self):
        return [call[1] for call in self.calls]


def write_app_project(project_dir: Path, name: str, csproj: str) -> Path:
    """Write a Blazor app project (csproj, index.html, Program.cs)."""
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / f"{name}.csproj").write_text(csproj)
    (project_dir / "wwwroot").mkdir(exist_ok=True)
    (project_dir / "wwwroot" / "index.html").write_text(INDEX_HTML)
    (project_dir / "Program.cs").write_text(PROGRAM_CS)
    return project_dir


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def ui():
    """ScaffoldUI double; prompt_confirm answers No unless a test says otherwise."""
    from bionic.scaffold.ui import ScaffoldUI

    fake = MagicMock(spec=ScaffoldUI)
    fake.prompt_confirm.return_value = False
    return fake


@pytest.fixture
def standalone_project(tmp_path):
    """A standalone Blazor app in tmp_path/App."""
    return write_app_project(tmp_path / "App", "App", STANDALONE_CSPROJ)


@pytest.fixture
def hosted_solution(tmp_path):
    """A hosted Blazor solution in tmp_path/Hosted with Client, Server and Shared."""
    solution = tmp_path / "Hosted"
    write_app_project(solution / "Client", "Hosted.Client", CLIENT_CSPROJ)
    server = solution / "Server"
    server.mkdir(parents=True)
    (server / "Hosted.Server.csproj").write_text(SERVER_CSPROJ)
    shared = solution / "Shared"
    shared.mkdir(parents=True)
    (shared / "Hosted.Shared.csproj").write_text(SHARED_CSPROJ)
    return solution
