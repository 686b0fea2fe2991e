"""Shared fixtures for resw-sync tests."""

import pytest

XAML_NS = 'xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation" ' \
          'xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"'

MAIN_PAGE = """<Page {ns}>
  <StackPanel>
    <TextBlock x:Uid="Greeting" Text="Hello"/>
    <Button x:Uid="Save" Content="Save" ToolTipService.ToolTip="Save changes" Width="100"/>
    <TextBlock Text="Not marked"/>
  </StackPanel>
</Page>
""".format(ns=XAML_NS)

RESOURCES = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <!-- Generated by the project template -->
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <data name="Greeting.Text" xml:space="preserve">
    <value>Hello</value>
    <comment></comment>
  </data>
</root>
"""


def page(body):
    """Wrap elements in a Page declaring the XAML namespaces."""
    return "<Page {}>{}</Page>".format(XAML_NS, body)


@pytest.fixture
def resources_file(tmp_path):
    path = tmp_path / "Strings" / "en-US" / "Resources.resw"
    path.parent.mkdir(parents=True)
    path.write_bytes(RESOURCES.encode("utf-8"))
    return path


@pytest.fixture
def empty_resources(tmp_path):
    path = tmp_path / "Resources.resw"
    path.write_bytes(b"<root></root>")
    return path
