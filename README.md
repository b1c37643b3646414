# componentmgr

A command-line tool for keeping a shared library of frontend components and
moving them between projects.

Exported components are stored under
`components/<framework>/<style>/<Name>/` in the current directory, each with a
`component.toml` file describing it (name, version, framework, style,
language, description, author, timestamps, tags and dependencies). A project
describes what it uses in `.component-manager.toml` in the current directory.

## Installation

```
pip install .
```

## Usage

```
componentmgr --help
componentmgr --version
```

### init

Asks for one or more frameworks, styles and languages from the supported
lists and writes `.component-manager.toml`. Options are picked by number or by
name, several at once separated by commas or spaces; at least one must be
chosen for each question.

```
componentmgr init
```

### export

Asks for a component name and the path of an existing component file, then
for a framework and a style out of those in `.component-manager.toml` (which
must exist). The file is copied to
`components/<framework>/<style>/<Name>/<Name>.<ext>`; if it is already there
you are asked whether to overwrite it. Finally a short description is asked for
and `component.toml` is written next to the file.

Only files with a supported extension (`vue`, `svelte`, `tsx`, `jsx`, `js`,
`ts`, `html`, `css`, `scss` and a number of others) are accepted. The metadata
records the first configured language, the current user as author, and these
dependencies depending on the chosen framework and style:

- `vue`: `vue@^3.0.0`
- `react`: `react@^18.0.0`, `react-dom@^18.0.0`
- `tailwind` style: `tailwindcss@^3.0.0`

```
componentmgr export
```

### import

Offers every file under `components/` whose framework and style both appear in
`.component-manager.toml`, asks which one to take and the target directory,
and copies the file there. An existing file is only replaced after
confirmation.

```
componentmgr import
```

### show

Without options, lists the components under
`<components_dir>/<framework>/<style>/` for each configured framework and
style. A component with a `component.toml` is listed when its framework, style
and language suit the project; one whose `component.toml` cannot be read is
reported as invalid; a directory without `component.toml` is listed as is.

With `--all` (`-a`), every component that has a valid `component.toml` is
listed, grouped by framework and style. Known frameworks and styles come first
in the order of the supported lists, others follow alphabetically.

```
componentmgr show
componentmgr show --all
```

### install

Prints the commands that would install the dependencies of one component or
of all of them: a single `npm install --save ...` line for npm packages and a
comment line for each internal component reference.

With a name, the component is looked up as `<components_dir>/<name>` and must
contain a `component.toml`; a missing component or an unreadable file is
reported as an error with exit status 1. Without a name, the `component.toml`
of every directory directly inside `components_dir` is read and the
dependencies are merged; directories without a readable one are skipped.

```
componentmgr install
componentmgr install react/tailwind/Button
```

## Project configuration

`.component-manager.toml` looks like this:

```toml
framework = ["react"]
style = ["tailwind"]
language = ["typescript"]
components_dir = "components"
```

`components_dir` is optional and defaults to `./components`; it is used by
`show` and `install`, while `export` and `import` always work on `components/`
in the current directory. When no valid configuration file exists, `show` and
`install` fall back to `vue` / `css` / `javascript`; `export` and `import`
refuse to run.

## Library use

The modules can also be used directly:

- `componentmgr.config`: `ProjectConfig`, `get_config`, `load_project_config`
  and the supported extension, framework, style and language lists.
- `componentmgr.dependencies`: `Dependency`, `DependencyKind` and
  `ComponentDependencies`, with `check_conflicts` (same npm package, different
  version spec), `generate_install_commands` and `detect_from_component`, which
  collects npm packages and relative imports from the `import`, `from` and
  `require` statements of a component's files.
- `componentmgr.export`: `ExportMetadata`, `build_metadata`,
  `framework_dependencies`, `destination_for`.
- `componentmgr.importer`: `extract_framework_and_style`, `find_importable`.
- `componentmgr.install`: `load_component_dependencies`,
  `install_dependencies_for`, `install_dependencies`, `InstallError`.
- `componentmgr.show`: `ShowMetadata`, `get_component_config`,
  `is_compatible`, `collect_components`.
- `componentmgr.component`: `Component` and `ComponentMetadata`, for
  `<Name>.metadata.toml` files holding a description and a version.
- `componentmgr.prompts`: `Prompter`, the line-based prompts used by the
  commands, reading from any input stream.

## What it does not do

- `install` never runs anything: it only prints the commands for you to run.
- `export` does not scan the component file for its imports; the recorded
  dependencies come only from the chosen framework and style.

## Development

```
pip install -e ".[test]"
pytest
```